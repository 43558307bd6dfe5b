"""Command-line access to model management and transcription."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .commands import CommandError, TranscriptionCommands
from .core.asr import ModelTier

TIER_CHOICES = [tier.value for tier in ModelTier]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localscribe",
        description="Transcribe WAV clips with a local Whisper model.",
    )
    parser.add_argument(
        "--models-dir",
        type=Path,
        default=None,
        help="Directory holding model files (defaults to the user data dir)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="Show which model is downloaded")

    download = sub.add_parser("download", help="Download a model")
    download.add_argument("model_type", choices=TIER_CHOICES)

    delete = sub.add_parser("delete", help="Delete a downloaded model")
    delete.add_argument("model_type", choices=TIER_CHOICES)

    transcribe = sub.add_parser("transcribe", help="Transcribe a 16 kHz WAV file")
    transcribe.add_argument("audio_file", type=Path)
    transcribe.add_argument("--json", action="store_true", help="Print JSON output")

    return parser


def run(args: argparse.Namespace, commands: TranscriptionCommands) -> str:
    if args.command == "status":
        return json.dumps(commands.get_model_status().to_dict(), indent=2)
    if args.command == "download":
        return commands.download_model(args.model_type)
    if args.command == "delete":
        return commands.delete_model(args.model_type)

    try:
        audio_data = args.audio_file.read_bytes()
    except OSError as e:
        raise CommandError(f"Failed to read {args.audio_file}: {e}") from e

    result = commands.transcribe(audio_data)
    if args.json:
        return result.model_dump_json()
    return result.text


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    commands = TranscriptionCommands(models_dir=args.models_dir)

    try:
        output = run(args, commands)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
