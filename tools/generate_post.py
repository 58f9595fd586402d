import argparse
import sys
from pathlib import Path

# Ensure repo root on sys.path
repo = Path(__file__).resolve().parents[1]
if str(repo) not in sys.path:
    sys.path.insert(0, str(repo))

from core.client import BlogWriterView, HttpTransport
from core.models.generator import TONES


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Generate a blog post through a running server")
    ap.add_argument("topic", help="Topic of the post")
    ap.add_argument("--server", default="http://127.0.0.1:5000", help="Base URL of the server")
    ap.add_argument("--tone", default="professional", help=f"One of: {', '.join(TONES)}")
    ap.add_argument("--length", default="medium", choices=["short", "medium", "long"])
    ap.add_argument("--keywords", default="", help="Comma-separated keywords")
    ap.add_argument("--out", default=None, help="Directory to save the markdown file into")
    args = ap.parse_args(argv)

    view = BlogWriterView(transport=HttpTransport(args.server))
    view.topic = args.topic
    view.tone = args.tone
    view.length = args.length
    view.keywords = args.keywords

    doc = view.generate()
    if doc is None:
        print(f"error: {view.error}", file=sys.stderr)
        return 1

    if args.out:
        if view.download(args.out) is None:
            print(f"error: {view.notice}", file=sys.stderr)
            return 1
        print(view.notice)
    else:
        print(doc.to_markdown())
    return 0


if __name__ == "__main__":
    sys.exit(main())
