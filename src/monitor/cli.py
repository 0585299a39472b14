"""CLI entry point for the conflict monitor."""

from __future__ import annotations

import logging
import threading

from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from monitor.config import load_config
from monitor.context import PipelineContext
from monitor.helpers import log_snapshot, parse_monitor_args, save_snapshot_local
from monitor.models import PipelineSnapshot
from monitor.pipeline import run_cycle, run_forever

load_dotenv()

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_monitor_args(argv)
    setup_logging(args.log_level)

    config = load_config(args.config)
    context = PipelineContext.from_config(config)

    if args.once:
        snapshot = run_cycle(context)
        log_snapshot(snapshot)
        if args.load_local:
            save_snapshot_local(snapshot, config.output.local_path)
        return

    stop_event = threading.Event()

    def on_cycle(snapshot: PipelineSnapshot) -> None:
        log_snapshot(snapshot)
        if args.load_local:
            save_snapshot_local(snapshot, config.output.local_path)

    try:
        if args.serve:
            from monitor_api.app import serve

            monitor_thread = threading.Thread(
                target=run_forever, args=(context, stop_event, on_cycle), name="monitor", daemon=True
            )
            monitor_thread.start()
            serve(context)
        else:
            run_forever(context, stop_event, on_cycle)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    finally:
        stop_event.set()


if __name__ == "__main__":
    main()
