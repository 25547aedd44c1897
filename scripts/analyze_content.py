#!/usr/bin/env python3
from __future__ import annotations

import argparse
import base64
import json
import mimetypes
import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parents[1]
API_PACKAGE_ROOT = REPO_ROOT / "apps" / "api"
if str(API_PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(API_PACKAGE_ROOT))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Analyze one or more pieces of content and print the fused verdict."
    )
    parser.add_argument("--text", action="append", default=[], help="Raw text to analyze")
    parser.add_argument("--url", action="append", default=[], help="URL to analyze")
    parser.add_argument("--image", action="append", default=[], help="Image file path")
    parser.add_argument("--document", action="append", default=[], help="Document file path")
    parser.add_argument("--audio", action="append", default=[], help="Audio file path")
    parser.add_argument(
        "--video-frames",
        nargs="+",
        action="append",
        default=[],
        help="JPEG frame paths extracted from one video",
    )
    return parser.parse_args()


def _encode(path: str) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode("ascii")


def _file_fields(path: str, key: str) -> dict[str, str]:
    mime_type, _ = mimetypes.guess_type(path)
    fields = {key: _encode(path), "fileName": Path(path).name}
    if mime_type:
        fields["mimeType"] = mime_type
    return fields


def build_requests(args: argparse.Namespace) -> list[dict[str, object]]:
    payloads: list[dict[str, object]] = []
    payloads.extend({"type": "text", "content": text} for text in args.text)
    payloads.extend({"type": "url", "content": url} for url in args.url)
    payloads.extend({"type": "image", **_file_fields(p, "imageBase64")} for p in args.image)
    payloads.extend(
        {"type": "video", "videoFrames": [_encode(frame) for frame in frames]}
        for frames in args.video_frames
    )
    payloads.extend(
        {"type": "document", **_file_fields(p, "documentBase64")} for p in args.document
    )
    payloads.extend({"type": "audio", **_file_fields(p, "audioBase64")} for p in args.audio)
    return payloads


def main() -> int:
    args = parse_args()
    try:
        payloads = build_requests(args)
    except OSError as exc:
        print(f"Could not read input: {exc}", file=sys.stderr)
        return 2
    if not payloads:
        print("Nothing to analyze. Pass at least one input.", file=sys.stderr)
        return 2

    from truthlens_core import AnalysisRequest, AnalysisSession, OracleError, analyze_content

    from app.main import get_oracle_client

    client = get_oracle_client()
    session = AnalysisSession()

    for payload in payloads:
        try:
            request = AnalysisRequest.model_validate(payload)
            analyze_content(request, client=client, session=session)
        except (OracleError, ValueError) as exc:
            print(f"{payload['type']} analysis failed: {exc}", file=sys.stderr)

    _, fusion = session.current()
    if fusion is None:
        return 1

    print(json.dumps(fusion.model_dump(mode="json", by_alias=True), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
