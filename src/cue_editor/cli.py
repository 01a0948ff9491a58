"""Command line interface"""
import os
import json
import argparse

from .utils.helpers import safe_print, format_millis
from .core import meta_keys
from .core.exceptions import CueError, TrackNotFoundError
from .core.file_finder import describe_tracks, find_cue_for_media
from .core.file_type import CueFileType
from .core.sheet import CueSheet
from .core.update import update


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


def parse_arguments(argv=None):
    """Parse command line arguments and environment variables"""
    # Read defaults from environment variables
    env_port = _env_int("PORT", 8080)
    env_length = _env_int("CUE_LENGTH", -1)
    env_encoding = os.environ.get("CUE_ENCODING") or None

    parser = argparse.ArgumentParser(
        description="CUE sheet reader and editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s show album.cue --length 3600000
  %(prog)s split album.cue --at 180000 --at 420000
  %(prog)s update album.cue --track 02 --set title="New Title"
  %(prog)s serve --port 8080

Environment Variables:
  PORT          - HTTP server port
  CUE_LENGTH    - Default media length in milliseconds
  CUE_ENCODING  - Force the CUE file encoding (default: auto-detect)
"""
    )
    parser.add_argument(
        "--encoding",
        default=env_encoding,
        help="CUE file encoding (default: auto-detect, env: CUE_ENCODING)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="List the tracks of a CUE sheet")
    show.add_argument("path", help="CUE file, or a media file with a sibling .cue")
    show.add_argument(
        "--length", type=int, default=env_length,
        help=f"Total media length in ms (default: {env_length}, env: CUE_LENGTH)"
    )
    show.add_argument("--json", action="store_true", help="Print the tracks as JSON")

    split = subparsers.add_parser("split", help="Insert tracks at given start times")
    split.add_argument("path", help="CUE file to split")
    split.add_argument(
        "--at", type=int, action="append", required=True, metavar="MS",
        help="Start time of a new track in ms (repeatable)"
    )
    split.add_argument(
        "--length", type=int, default=env_length,
        help=f"Total media length in ms (default: {env_length}, env: CUE_LENGTH)"
    )
    split.add_argument("--media", help="Media file name for a new sheet, or to replace the FILE line")
    split.add_argument("--output", help="Output path (default: overwrite the input)")

    upd = subparsers.add_parser("update", help="Change metadata of one track in place")
    upd.add_argument("path", help="CUE file to update")
    upd.add_argument("--track", required=True, help="Track ID, e.g. 02")
    upd.add_argument(
        "--set", action="append", default=[], metavar="KEY=VALUE", dest="values",
        help="Metadata value to set (repeatable)"
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP edit service")
    serve.add_argument(
        "--port", type=int, default=env_port,
        help=f"HTTP server port (default: {env_port}, env: PORT)"
    )
    serve.add_argument(
        "--length", type=int, default=env_length,
        help=f"Default media length in ms (default: {env_length}, env: CUE_LENGTH)"
    )

    return parser.parse_args(argv)


def _log_func(args):
    return safe_print if args.verbose else None


def _resolve_cue(path):
    if path.lower().endswith(".cue"):
        return path
    return find_cue_for_media(path)


def cmd_show(args):
    cue_path = _resolve_cue(args.path)
    if cue_path is None:
        safe_print(f"❌ No CUE sheet found for {args.path}")
        return 1
    sheet = CueSheet.from_file(cue_path, args.length, encoding=args.encoding, log_func=_log_func(args))

    if args.json:
        safe_print(json.dumps({
            "path": cue_path,
            "media": sheet.media,
            "metadata": sheet.metadata,
            "tracks": describe_tracks(sheet, cue_path),
        }, indent=2, ensure_ascii=False))
        return 0

    safe_print(f"📄 {cue_path}")
    if sheet.media:
        safe_print(f"🎵 Media: {sheet.media}")
    for key in sorted(sheet.metadata):
        safe_print(f"   {key}: {sheet.metadata[key]}")
    for track in sheet.tracks:
        title = track.metadata.get(meta_keys.TITLE, "")
        artist = track.metadata.get(meta_keys.ARTIST, "")
        safe_print(
            f"  {track.id}  {format_millis(track.start):>11} - {format_millis(track.end):<11}  "
            f"{artist + ' - ' if artist else ''}{title}"
        )
    safe_print(f"📊 {len(sheet.tracks)} track(s)")
    return 0


def cmd_split(args):
    log_func = _log_func(args)
    if os.path.exists(args.path):
        if not CueFileType().accept(args.path):
            safe_print(f"❌ {args.path} is not a CUE file")
            return 1
        sheet = CueSheet.from_file(args.path, args.length, encoding=args.encoding, log_func=log_func)
    else:
        if not args.media:
            safe_print(f"❌ {args.path} does not exist (use --media to create a new sheet)")
            return 1
        sheet = CueSheet(args.length)

    media = args.media or sheet.media
    if not media:
        safe_print(f"❌ {args.path} has no FILE line (use --media to set the media file name)")
        return 1

    inserted = 0
    for time in sorted(args.at):
        track = sheet.insert_track(time)
        if track is None:
            safe_print(f"⚠️ Skipped {time} ms: not a new split point")
        else:
            safe_print(f"✂️ Track {track.id} starts at {format_millis(track.start)}")
            inserted += 1

    output = args.output or args.path
    sheet.save(output, media)
    safe_print(f"✅ Saved {len(sheet.tracks)} track(s) to {output} ({inserted} inserted)")
    return 0


def cmd_update(args):
    values = {meta_keys.TRACK: args.track}
    for item in args.values:
        key, sep, value = item.partition("=")
        if not sep:
            safe_print(f"❌ Invalid --set value (expected KEY=VALUE): {item}")
            return 1
        values[key] = value

    requested = [key for key in values if key != meta_keys.TRACK]
    updated = update(args.path, values, encoding=args.encoding, log_func=_log_func(args))

    applied = [key for key in requested if key not in values]
    skipped = [key for key in requested if key in values]
    if applied:
        safe_print(f"✅ Applied: {', '.join(applied)}")
    if skipped:
        safe_print(f"ℹ️ Not applied: {', '.join(skipped)}")
    if not updated:
        safe_print(f"⚠️ {args.path} was not changed")
    return 0 if updated else 1


def main(argv=None):
    """Main entry point"""
    args = parse_arguments(argv)

    if args.command == "serve":
        from .api.server import start_server
        start_server("0.0.0.0", args.port, args.encoding, args.length)
        safe_print("👋 Shutdown complete")
        return 0

    commands = {"show": cmd_show, "split": cmd_split, "update": cmd_update}
    try:
        return commands[args.command](args)
    except TrackNotFoundError as e:
        safe_print(f"❌ {e}")
        return 1
    except (CueError, OSError) as e:
        safe_print(f"💥 {e}")
        return 2
