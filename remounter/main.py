import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import SMB_PORT, Settings
from .core.exceptions import RemounterError, ResolutionError
from .logging_config import setup_logging
from .models import ShareSpec
from .services.connectivity import ConnectivityMonitor, TargetResolver
from .services.network_mount import BaseMounter, PlatformFactory, UnsupportedPlatformError
from .services.remount import RemountOrchestrator
from .services.shutdown import ShutdownController, ShutdownToken


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remounter",
        description="Remount SMB shares whenever their server becomes reachable again",
    )
    parser.add_argument(
        "host", nargs="?", help="the hostname to monitor (e.g. nas.local)"
    )
    parser.add_argument(
        "smb_shares", nargs="?", help="the SMB shares to remount (comma-separated paths)"
    )
    parser.add_argument(
        "-p", "--post-mount-script", help="a script to run after remounting"
    )
    parser.add_argument(
        "--log-level",
        choices=logging.getLevelNamesMapping().keys(),
        help="logging level to use (default: INFO)",
    )
    parser.add_argument("--log-file", dest="log_file_path", help="also log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Build Settings from the command line, falling back to REMOUNTER_* env vars and settings.env"""
    parser = build_parser()
    args = parser.parse_args(argv)
    overrides = {key: value for key, value in vars(args).items() if value is not None}
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        parser.error(problems)


def log_startup(settings: Settings) -> None:
    lines = [
        f"Starting remounter version {__version__}",
        f"Monitoring SMB shares on {settings.host}:",
    ]
    lines.extend(f" - {path}" for path in settings.share_paths)
    if settings.post_mount_script:
        lines.append(f"Post-mount script: {settings.post_mount_script}")
    logging.info("\n".join(lines))


async def run(
    settings: Settings,
    mounter: Optional[BaseMounter] = None,
    resolver: Optional[TargetResolver] = None,
    shutdown_token: Optional[ShutdownToken] = None,
) -> int:
    """Resolve the target and run the monitor until shutdown. Returns the process exit code."""
    try:
        mounter = mounter or PlatformFactory().create_mounter()
        target = await (resolver or TargetResolver()).resolve(settings.host, SMB_PORT)
    except (ResolutionError, UnsupportedPlatformError) as e:
        logging.error(f"Error creating remounter: {e}")
        return 1

    shares = ShareSpec(host=settings.host, paths=tuple(settings.share_paths))
    token = shutdown_token or ShutdownToken()
    monitor = ConnectivityMonitor(
        target=target,
        shares=shares,
        orchestrator=RemountOrchestrator(mounter),
        shutdown_token=token,
        post_mount_script=settings.post_mount_script,
    )

    try:
        with ShutdownController(token):
            await monitor.run()
    except RemounterError as e:
        logging.error(f"Error running remounter: {e}", exc_info=True)
        return 1
    except Exception as e:
        logging.error(f"Unexpected error running remounter: {e}", exc_info=True)
        return 1

    logging.info("Remounter exited normally")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Program entry point"""
    settings = load_settings(argv)
    setup_logging(settings)
    log_startup(settings)
    sys.exit(asyncio.run(run(settings)))


if __name__ == "__main__":
    main()
