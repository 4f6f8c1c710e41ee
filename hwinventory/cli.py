# hwinventory/cli.py
"""
Hardware inventory command line interface.
Prints one inventory document per configured system as JSON or YAML.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .collectors import InventoryCollector, SUB_COLLECTORS
from .config.settings import SystemConfig, initialize_config
from .utils.logging_config import setup_logging, get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hwinventory',
        description='Report cache topology, DMI identifiers and network interfaces'
    )
    parser.add_argument('--config', help='Path to inventory.yml')
    parser.add_argument('--chroot', help='Read sysfs below this root (e.g. an unpacked snapshot)')
    parser.add_argument('--host', help='Collect from this host over SSH instead of the configured systems')
    parser.add_argument('--port', type=int, default=22, help='SSH port')
    parser.add_argument('--user', default='root', help='SSH username')
    parser.add_argument('--key', help='SSH private key path')
    parser.add_argument('--section', action='append', choices=sorted(SUB_COLLECTORS),
                        help='Section to collect (repeatable, default: all)')
    parser.add_argument('--format', choices=['json', 'yaml'], help='Output format')
    parser.add_argument('--output-dir', help='Write <system>_inventory.<format> files here instead of stdout')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = initialize_config(args.config)
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        print(f"❌ Failed to load configuration: {e}", file=sys.stderr)
        return 1

    settings = config.logging_settings
    setup_logging(settings.level, enable_debug=args.debug,
                  log_to_file=settings.log_to_file, log_dir=settings.log_dir)
    logger = get_logger('hwinventory')

    if args.host:
        systems = [SystemConfig(name=args.host, type='ssh', host=args.host, port=args.port,
                                username=args.user, ssh_key_path=args.key)]
    else:
        systems = config.get_enabled_systems()
        if args.chroot:
            for system in systems:
                if system.type == 'local':
                    system.chroot = args.chroot
        config.systems = systems
        if not config.validate_configuration():
            print("❌ Configuration validation failed", file=sys.stderr)
            return 1

    collection = config.collection_config
    output_format = args.format or collection.output_format
    sections = args.section or collection.sections

    failures = 0
    for system in systems:
        system_config = system.__dict__.copy()
        system_config['sections'] = sections
        system_config['disable_warnings'] = collection.disable_warnings

        print(f"📡 Collecting from {system.name} ({system.type})...", file=sys.stderr)
        collector = InventoryCollector(system.name, system_config)
        result = collector.collect()

        if not result.success:
            failures += 1
            logger.error(f"{system.name}: Collection failed - {result.error}")
            print(f"❌ {system.name}: Collection failed - {result.error}", file=sys.stderr)
            continue

        if args.output_dir:
            filename = f"{system.name}_inventory.{output_format}"
            collector.save_raw_data(result, filename, Path(args.output_dir), output_format)
            print(f"💾 Saved to {Path(args.output_dir) / filename}", file=sys.stderr)
        else:
            sys.stdout.write(result.dumps(output_format))
            sys.stdout.write('\n')

    logger.info(f"Collection completed: {len(systems) - failures}/{len(systems)} successful")
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())
