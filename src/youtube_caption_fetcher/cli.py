#!/usr/bin/env python3
"""
Command-line interface for YouTube Caption Fetcher.

Usage:
  ycf transcript "https://www.youtube.com/watch?v=xxx" --lang en
  ycf title "https://www.youtube.com/watch?v=xxx"
  ycf tracks "https://www.youtube.com/watch?v=xxx"
  ycf fetch "https://www.youtube.com/watch?v=xxx" -o captions.json
"""

import argparse
import json
import sys
from dataclasses import replace

from . import __version__
from .config import Settings, DEFAULT_SETTINGS
from .exceptions import CaptionFetcherError
from .fetcher import YouTubeCaptionFetcher
from .logging_config import setup_logging


def load_settings(args) -> Settings:
    """Build settings from --config and command-line overrides."""
    settings = Settings.from_file(args.config) if args.config else DEFAULT_SETTINGS
    if args.insecure:
        settings = replace(settings, verify_ssl=False)
    return settings


def build_fetcher(args) -> YouTubeCaptionFetcher:
    settings = load_settings(args)
    return YouTubeCaptionFetcher(getattr(args, 'lang', None), settings=settings)


def write_output(text: str, output_path=None):
    """Write text to a file or stdout."""
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.write('\n')
        print(f"Saved: {output_path}", file=sys.stderr)
    else:
        print(text)


def dump_json(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def cmd_transcript(args):
    """Handle the transcript command."""
    with build_fetcher(args) as fetcher:
        segments = fetcher.get_transcript(args.url)

    if args.format == 'text':
        text = '\n'.join(f"[{s.time}] {s.text}" for s in segments)
    else:
        text = dump_json([s.to_dict() for s in segments])
    write_output(text, args.output)
    return 0


def cmd_title(args):
    """Handle the title command."""
    with build_fetcher(args) as fetcher:
        title = fetcher.get_video_title(args.url)
    print(title)
    return 0


def cmd_tracks(args):
    """Handle the tracks command to list available caption tracks."""
    with build_fetcher(args) as fetcher:
        tracks = fetcher.list_caption_tracks(args.url)

    if args.json:
        print(dump_json([t.to_dict() for t in tracks]))
        return 0

    print(f"Caption tracks: {len(tracks)}")
    print("-" * 60)
    for t in tracks:
        gen = "(auto-generated)" if t.is_generated else "(manual)"
        print(f"  {t.language_code:<6} {t.display_name} {gen}")
    return 0


def cmd_fetch(args):
    """Handle the fetch command (title and transcript together)."""
    with build_fetcher(args) as fetcher:
        captions = fetcher.fetch(args.url)
    write_output(dump_json(captions.to_dict(include_segments=not args.no_segments)), args.output)
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog='ycf',
        description='YouTube Caption Fetcher - fetch caption transcripts and titles from watch pages',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Transcript as JSON
  ycf transcript "https://www.youtube.com/watch?v=xxx"

  # French transcript as plain text
  ycf transcript "https://www.youtube.com/watch?v=xxx" --lang fr --format text

  # Video title
  ycf title "https://www.youtube.com/watch?v=xxx"

  # Available caption languages
  ycf tracks "https://www.youtube.com/watch?v=xxx"
        """,
    )

    parser.add_argument('--version', '-v', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='YAML/JSON settings file')
    parser.add_argument('--insecure', action='store_true',
                        help='Disable TLS certificate verification')
    parser.add_argument('--verbose', action='store_true', help='Debug logging to stderr')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # transcript command
    transcript_parser = subparsers.add_parser('transcript', help='Fetch a video transcript')
    transcript_parser.add_argument('url', help='YouTube watch-page URL')
    transcript_parser.add_argument('--lang', '-l', help='Two-letter caption language (default: en)')
    transcript_parser.add_argument('--format', '-f', choices=['json', 'text'], default='json',
                                   help='Output format (default: json)')
    transcript_parser.add_argument('--output', '-o', help='Output file path (default: stdout)')
    transcript_parser.set_defaults(func=cmd_transcript)

    # title command
    title_parser = subparsers.add_parser('title', help='Fetch a video title')
    title_parser.add_argument('url', help='YouTube watch-page URL')
    title_parser.set_defaults(func=cmd_title)

    # tracks command
    tracks_parser = subparsers.add_parser('tracks', help='List available caption tracks')
    tracks_parser.add_argument('url', help='YouTube watch-page URL')
    tracks_parser.add_argument('--json', action='store_true', help='Output as JSON')
    tracks_parser.set_defaults(func=cmd_tracks)

    # fetch command
    fetch_parser = subparsers.add_parser('fetch', help='Fetch title and transcript as JSON')
    fetch_parser.add_argument('url', help='YouTube watch-page URL')
    fetch_parser.add_argument('--lang', '-l', help='Two-letter caption language (default: en)')
    fetch_parser.add_argument('--output', '-o', help='Output file path (default: stdout)')
    fetch_parser.add_argument('--no-segments', action='store_true',
                              help='Omit timestamped segments')
    fetch_parser.set_defaults(func=cmd_fetch)

    # Parse arguments
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(verbose=args.verbose)

    try:
        return args.func(args)
    except CaptionFetcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
