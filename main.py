import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from models.errors import OverlayError
from orchestrator.core import OverlayOrchestrator


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Answer the currently selected text")
    parser.add_argument(
        "provider",
        nargs="?",
        default=None,
        help="'gemini' or 'wikipedia'; anything else (or nothing) uses OpenAI",
    )
    parser.add_argument("--model", default=None, help="Override the model for this call")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        result = asyncio.run(OverlayOrchestrator().generate_answer(args.provider, args.model))
    except OverlayError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
