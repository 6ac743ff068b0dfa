"""CLI entry point for wortly.

Usage:
  python -m wortly serve [--port PORT] [--host HOST]
  python -m wortly stop
  python -m wortly restart [--port PORT]
  python -m wortly status
  python -m wortly play [--auto]
  python -m wortly stats
"""
from __future__ import annotations

import logging
import os
import signal
import sys
import time
from pathlib import Path

PID_FILE = Path(__file__).resolve().parent.parent / ".server.pid"


def main():
    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "serve":
        _serve(args[1:])
    elif command == "stop":
        _stop()
    elif command == "restart":
        _restart(args[1:])
    elif command == "status":
        _status()
    elif command == "play":
        _play(args[1:])
    elif command == "stats":
        _stats()
    else:
        print(f"Unknown command: {command}")
        print("Commands: serve, stop, restart, status, play, stats")
        sys.exit(1)


def _parse_flag(args: list[str], name: str, default: str) -> str:
    for i, a in enumerate(args):
        if a == name and i + 1 < len(args):
            return args[i + 1]
    return default


def _read_pid() -> int | None:
    """Read PID from file, return None if stale or missing."""
    if not PID_FILE.exists():
        return None
    try:
        pid = int(PID_FILE.read_text().strip())
        os.kill(pid, 0)
        return pid
    except (ValueError, ProcessLookupError, PermissionError):
        PID_FILE.unlink(missing_ok=True)
        return None


def _write_pid() -> None:
    PID_FILE.write_text(str(os.getpid()))


def _remove_pid() -> None:
    PID_FILE.unlink(missing_ok=True)


def _stop() -> bool:
    """Stop a running server. Returns True if a server was stopped."""
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
        return False
    try:
        os.kill(pid, signal.SIGTERM)
        print(f"Stopped server (PID {pid}).")
        PID_FILE.unlink(missing_ok=True)
        return True
    except ProcessLookupError:
        print("Server was not running (stale PID file removed).")
        PID_FILE.unlink(missing_ok=True)
        return False


def _status():
    pid = _read_pid()
    if pid is None:
        print("Server is not running.")
    else:
        print(f"Server is running (PID {pid}).")


def _restart(args: list[str]):
    _stop()
    time.sleep(1)
    _serve(args)


def _serve(args: list[str]):
    import uvicorn

    from wortly.config import load_settings

    existing = _read_pid()
    if existing is not None:
        print(f"Server already running (PID {existing}). Use 'restart' or 'stop' first.")
        sys.exit(1)

    settings = load_settings()
    port = int(_parse_flag(args, "--port", str(settings.port)))
    host = _parse_flag(args, "--host", settings.host)
    _write_pid()

    print(f"Starting Wortly on http://{host}:{port}")
    print("Press Ctrl+C to stop\n")
    try:
        uvicorn.run(
            "wortly.app:app",
            host=host,
            port=port,
            reload=False,
            timeout_graceful_shutdown=5,
        )
    finally:
        _remove_pid()


def _play(args: list[str]):
    """Terminal quiz over the same session core the web API uses."""
    from wortly.config import load_settings
    from wortly.parsers.dictionary_parser import load_dictionary
    from wortly.session import DEFAULT_AUTO_ADVANCE_SECONDS, STATE_ACTIVE, QuizSession

    logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
    settings = load_settings()
    dictionary = load_dictionary(settings)
    if not dictionary:
        print("Dictionary is empty.")
        sys.exit(1)

    auto = settings.auto_advance_seconds
    if "--auto" in args and auto is None:
        auto = DEFAULT_AUTO_ADVANCE_SECONDS

    session = QuizSession(dictionary, auto_advance_seconds=auto)
    session.add_listener(lambda q: print("\n" + "─" * 40))
    session.next_question()

    print("Wortly: 1-4 answers, n = new question, r = reset, q = quit")
    while True:
        q = session.question
        if session.state == STATE_ACTIVE:
            print(f"\n{q.instruction}\n  {q.prompt}")
            for i, option in enumerate(q.options, 1):
                print(f"  {i}) {option}")

        try:
            choice = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if choice == "q":
            break
        if choice == "n":
            session.next_question()
            continue
        if choice == "r":
            if input("Reset all stats? [y/N] ").strip().lower() == "y":
                session.reset()
            continue
        if choice.isdigit() and 1 <= int(choice) <= len(q.options):
            result = session.check_answer(q.options[int(choice) - 1])
            if result is None:
                continue
            mark = "✓" if result["correct"] else f"✗  ({result['correct_answer']})"
            stats = result["stats"]
            print(f"{mark}   score {stats['score']}  "
                  f"success {stats['success_rate']}%  streak {stats['streak']}")
            if session.auto_advance_seconds is not None:
                time.sleep(session.auto_advance_seconds)
                session.tick()
            continue
        print("Enter 1-4, n, r or q.")

    stats = session.stats()
    print(f"Final: {stats['score']}/{stats['total_questions']} ({stats['success_rate']}%)")


def _stats():
    from wortly.config import load_settings
    from wortly.parsers.dictionary_parser import load_dictionary

    settings = load_settings()
    entries = load_dictionary(settings)

    print("Wortly Dictionary")
    print("=" * 40)
    print(f"Source:             {settings.dictionary_path}")
    print(f"Total entries:      {len(entries)}")
    print(f"Verbs:              {sum(1 for e in entries if e.is_verb)}")
    print(f"Nouns:              {sum(1 for e in entries if not e.is_verb)}")
    print(f"With conjugations:  {sum(1 for e in entries if e.can_conjugate)}")
    print(f"With perfect form:  {sum(1 for e in entries if e.has_perfect)}")


if __name__ == "__main__":
    main()
