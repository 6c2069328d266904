import argparse
from omegaconf import OmegaConf

from .common.config.manager import ConfigManager
from .control.application.builder import ControlApplicationBuilder

def main(argv=None):
    """
    Main entry point for the intersection controller simulation.
    """
    parser = argparse.ArgumentParser(description="Smart Intersection - Control Entry Point")
    parser.add_argument('mode', choices=['simulate'], help="Mode to run")
    parser.add_argument('--profile', default='default', help="Profile under conf/control/")
    parser.add_argument('--config-dir', default='conf', help="Configuration directory")
    parser.add_argument('--ticks', type=int, default=None, help="Stop after N ticks")

    args, unknown = parser.parse_known_args(argv)

    # Remaining args are dotlist overrides, e.g. timing.base_green_seconds=40
    control_cfg = ConfigManager(args.config_dir).load_control_config(args.profile, overrides=unknown)
    cfg = OmegaConf.create({"control": control_cfg})

    builder = ControlApplicationBuilder(cfg)
    scheduler = builder.build_all()
    sensor_feed = builder.get_components()['sensor_feed']

    print("Smart Traffic Lighting System")
    print("Initializing...")

    if sensor_feed:
        sensor_feed.start()
    try:
        scheduler.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        print("\nStopping controller...")
    finally:
        if sensor_feed:
            sensor_feed.stop()
        print("Controller stopped.")

if __name__ == "__main__":
    main()
