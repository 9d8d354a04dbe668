import argparse
import asyncio
import sys
from pathlib import Path

from matchmaker.frameworks_drivers.config import DEFAULT_CONFIG_PATH, Config, validate_dedicated_server_executable
from matchmaker.frameworks_drivers.server_provisioner import ServerProvisioner
from matchmaker.frameworks_drivers.waiting_pool import WaitingPool
from matchmaker.interface_adapters.connection_handler import ConnectionHandler
from matchmaker.interface_adapters.service import MatchmakerService
from matchmaker.shared.errors import ConfigError
from matchmaker.shared.logger import DEFAULT_LOG_LEVEL, LOG_LEVELS, Logger
from matchmaker.use_cases.process_request import ProcessRequest

logger = Logger.get(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="matchmaker",
        description="Pairs game clients with freshly started dedicated servers",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--generate-default-config",
        action="store_true",
        help="Write the default config file to the --config path and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def build_service(config: Config) -> MatchmakerService:
    provisioner = ServerProvisioner(config)
    waiting_pool = WaitingPool(provisioner)
    process_request = ProcessRequest(waiting_pool)
    connection_handler = ConnectionHandler(process_request)
    return MatchmakerService(config, connection_handler)


def main(argv=None) -> int:
    args = parse_args(argv)
    Logger.configure(args.log_level)

    if args.generate_default_config:
        try:
            Config.generate_default(args.config)
        except OSError as e:
            logger.error(f"Problem writing default config to '{args.config}': {e}")
            return 1
        return 0

    try:
        config = Config.load(args.config)
    except (FileNotFoundError, ConfigError) as e:
        logger.error(f"Error reading config: {e}. Use --generate-default-config to generate default config")
        return 1

    working_directories = Path(config.working_directories_path)
    try:
        working_directories.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Problem creating directory '{working_directories}': {e}")
        return 1

    if not validate_dedicated_server_executable(config):
        return 1

    service = build_service(config)
    logger.info("Starting matchmaker...")
    asyncio.run(service.serve_forever())
    return 0


if __name__ == "__main__":
    sys.exit(main())
