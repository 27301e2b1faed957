#!/usr/bin/env python3
"""
Launcher for the BK-Tree Spell Checker web front end
Usage: python run.py [--dev] [--port PORT] [--host HOST] [--words PATH]
"""

import os
import sys
import logging
import argparse
import subprocess
from pathlib import Path

from bkspell.config import APP_NAME, APP_VERSION, ENV_WORD_LIST
from bkspell.utils import get_word_list_path, setup_logging


def build_command(host='localhost', port=8501, dev_mode=False):
    """Return the ``streamlit run`` command line for ``main.py``."""
    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(Path(__file__).parent / 'main.py'),
        '--server.address', host,
        '--server.port', str(port),
        '--server.headless', 'true'
    ]
    if dev_mode:
        cmd.extend(['--server.runOnSave', 'true'])
    return cmd


def run_streamlit(host='localhost', port=8501, dev_mode=False, words=None):
    """Launch the Streamlit application"""
    env = dict(os.environ)
    if words:
        env[ENV_WORD_LIST] = str(Path(words).resolve())

    print(f"🚀 {APP_NAME} v{APP_VERSION} on http://{host}:{port}")
    print("⏹️ Stop: Ctrl+C")
    print("-" * 60)

    try:
        return subprocess.run(build_command(host, port, dev_mode), env=env).returncode
    except KeyboardInterrupt:
        print("\n👋 Application stopped")
        return 0


def main():
    parser = argparse.ArgumentParser(description=f"{APP_NAME} - Streamlit")
    parser.add_argument('--host', default='localhost', help='Listen address (default: localhost)')
    parser.add_argument('--port', type=int, default=8501, help='Server port (default: 8501)')
    parser.add_argument('--dev', action='store_true', help='Development mode with auto-reload')
    parser.add_argument('--words', default=None, help='Word list (default: BKSPELL_WORD_LIST or words.txt)')
    args = parser.parse_args()

    setup_logging()

    words = args.words or get_word_list_path()
    if not Path(words).exists():
        logging.error(f"Word list not found: {words}")
        return 1

    return run_streamlit(args.host, args.port, args.dev, words)


if __name__ == "__main__":
    sys.exit(main())
