import argparse
import logging
import sys

from pydantic import ValidationError

from guard_patrol.config import Part, SimulationConfig, load_simulation_config
from guard_patrol.process import MainProcess
from guard_patrol.utils import load_grid


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate the guard patrol and count loop-inducing obstacle placements."
    )
    parser.add_argument("input", help="Path to the text map")
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument(
        "--part",
        type=Part,
        default=Part.BOTH,
        choices=list(Part),
        help="Which answer to compute (1, 2, both)",
    )
    parser.add_argument(
        "--render", action="store_true", help="Print the map on every tick of part 1"
    )
    parser.add_argument(
        "--parallel", action="store_true", help="Run placement trials in a process pool"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = (
            load_simulation_config(args.config) if args.config else SimulationConfig()
        )
    except (FileNotFoundError, ValidationError) as e:
        logging.basicConfig(level=logging.ERROR)
        logging.error("Configuration error: %s", e)
        return 1

    if args.render:
        config.simulator.render = True
    if args.parallel:
        config.search.parallel = True

    logging.basicConfig(
        filename=config.logging.file,
        level=config.logging.level.value,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        grid, start = load_grid(args.input)
    except (FileNotFoundError, ValueError) as e:
        logging.error("Cannot load map: %s", e)
        return 1

    process = MainProcess(config, grid, start)
    part_one = process.solve_part_one()
    if args.part in (Part.ONE, Part.BOTH):
        print(f"Part 1: {part_one.visited_count}")
    if args.part in (Part.TWO, Part.BOTH):
        part_two = process.solve_part_two(part_one.visited)
        print(f"Part 2: {part_two.loop_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
