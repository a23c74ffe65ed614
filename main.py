"""
AirMouse - Hand Gesture Virtual Mouse

Entry point for the application.
"""
import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="AirMouse - control the pointer with hand gestures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.yaml)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve gestures but do not send OS pointer events",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every detected gesture and enable debug logging",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides config)",
    )

    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many detection cycles",
    )

    return parser.parse_args(argv)


def build_components(config, dry_run=False):
    """Create the pointer backend, pipeline and dispatcher from config."""
    from gestures import PointerPipeline
    from pointer import ActionDispatcher, PyAutoGUIBackend, RecordingBackend

    backend = RecordingBackend() if dry_run else PyAutoGUIBackend()

    width, height = config.screen.width, config.screen.height
    if not width or not height:
        width, height = backend.screen_size()

    pipeline = PointerPipeline(config, (width, height))
    dispatcher = ActionDispatcher(backend, config.dispatch)
    return backend, pipeline, dispatcher


def run_debug(config, dry_run=True, max_frames=None):
    """
    Run the detection loop in the foreground and print gesture changes.
    Useful for checking thresholds without a Qt event loop.
    """
    from webcam import HandTracker

    tracker = HandTracker(config)
    _, pipeline, dispatcher = build_components(config, dry_run=dry_run)

    print("Starting debug mode...")
    print("Press Ctrl+C to quit")
    print("-" * 40)

    if not tracker.start():
        print("ERROR: Could not start hand tracker")
        return 1

    last_gesture = None
    try:
        while max_frames is None or pipeline.frame_count < max_frames:
            result = pipeline.process(tracker.get_frame())
            dispatcher.dispatch(result)

            if not result.hand_present:
                gesture = "NO HAND"
            else:
                gesture = result.gesture or "NONE"

            if gesture != last_gesture:
                position = result.position or (0.0, 0.0)
                print(f"[{pipeline.frame_count:5d}] {gesture:<10} "
                      f"({position[0]:.0f}, {position[1]:.0f})")
                last_gesture = gesture
    except KeyboardInterrupt:
        pass
    finally:
        dispatcher.flush()
        tracker.stop()

    return 0


def run_mode(config, dry_run=False, max_frames=None):
    """Run AirMouse with the detection loop on a worker thread."""
    import signal
    import atexit
    from PyQt5.QtCore import QCoreApplication, QThread, Qt
    from webcam import WebcamWorker

    app = QCoreApplication(sys.argv)

    _, pipeline, dispatcher = build_components(config, dry_run=dry_run)

    thread = QThread()
    worker = WebcamWorker(config, pipeline, dispatcher, max_frames=max_frames)
    worker.moveToThread(thread)

    def cleanup():
        """Ensure camera is released on exit."""
        print("\nCleaning up camera resources...")
        worker.stop_process()
        thread.quit()
        thread.wait(2000)
        print("Cleanup complete.")

    atexit.register(cleanup)

    def signal_handler(signum, frame):
        """Handle Ctrl+C and kill signals gracefully."""
        print(f"\nReceived signal {signum}, shutting down...")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    thread.started.connect(worker.start_process)
    worker.finished.connect(app.quit, Qt.QueuedConnection)
    worker.error.connect(lambda msg: print(f"WORKER ERROR: {msg}"), Qt.QueuedConnection)

    thread.start()

    try:
        result = app.exec_()
    finally:
        cleanup()
        atexit.unregister(cleanup)

    return result


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    from gestures import load_config
    from gestures.logger import setup_logging
    config = load_config(args.config)

    if args.log_level:
        config.logging.level = args.log_level
    elif args.debug:
        config.logging.level = "DEBUG"
    setup_logging(config.logging.level, config.logging.file)

    print("AirMouse starting...")
    print(f"  Dry run: {args.dry_run}")
    print(f"  Smoothing: decay={config.smoothing.decay} seed={config.smoothing.seed}")
    print(f"  Debug: {args.debug}")
    print()

    if args.debug:
        return run_debug(config, dry_run=args.dry_run, max_frames=args.frames)
    return run_mode(config, dry_run=args.dry_run, max_frames=args.frames)


if __name__ == "__main__":
    sys.exit(main())
