"""
Practice Site Server Entry Point.

Serve the static training site with its JSON helper endpoints.

Usage:
    python run_site_server.py
    python run_site_server.py --port 9000 --delay 0.5

    # Use environment variables
    PRACTICE_SITE_PORT=9000 python run_site_server.py
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from practice_site.config import get_config, update_config
from practice_site.server import run_site_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="Automation practice site server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  PRACTICE_SITE_HOST            Host to bind (default: 127.0.0.1)
  PRACTICE_SITE_PORT            Port to listen on (default: 8000)
  PRACTICE_SITE_DIR             Directory holding the static site
  PRACTICE_SITE_DYNAMIC_DELAY   Simulated latency in seconds (default: 2.0)
  PRACTICE_SITE_DYNAMIC_JITTER  Random extra latency in seconds (default: 0.0)
  PRACTICE_SITE_LOG_LEVEL       Logging level (default: INFO)
        """,
    )

    parser.add_argument(
        "--host",
        default=config.host,
        help=f"Host to bind (default: {config.host})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.port,
        help=f"Port to listen on (default: {config.port})",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=config.dynamic_delay,
        help=f"Dynamic content latency in seconds (default: {config.dynamic_delay})",
    )

    parser.add_argument(
        "--jitter",
        type=float,
        default=config.dynamic_jitter,
        help=f"Random extra latency in seconds (default: {config.dynamic_jitter})",
    )

    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.log_level})",
    )

    args = parser.parse_args()

    config = update_config(
        host=args.host,
        port=args.port,
        dynamic_delay=args.delay,
        dynamic_jitter=args.jitter,
        log_level=args.log_level,
    )
    logging.basicConfig(level=config.log_level)

    print("=" * 60)
    print("Automation Practice Site")
    print("=" * 60)
    print(f"Site: {config.site_dir}")
    print(f"Open http://{config.host}:{config.port} in your browser")
    print("=" * 60)

    try:
        asyncio.run(run_site_server(host=config.host, port=config.port, config=config))
    except KeyboardInterrupt:
        print("\nServer stopped.")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
