"""
Export images of the starting state and of each library pattern for review
"""
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent / "src"))

from termlife.config import GRID_SIZE, LOG_FORMAT
from termlife.core import GameOfLife, get_all_patterns, new_grid, place_pattern, population, seed_grid
from termlife.visualization import visualize_state, visualize_trajectory, create_animation

logger = logging.getLogger("generate_samples")


def main():
    """Write initial, trajectory and animation files for the seed and every pattern."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    project_root = Path(__file__).parent.parent
    output_dir = project_root / "figures" / "samples"
    output_dir.mkdir(parents=True, exist_ok=True)

    gol = GameOfLife(GRID_SIZE)
    seed = seed_grid(GRID_SIZE)
    trajectory = gol.simulate(seed, 60)
    visualize_state(seed, title="SEED (t=0)", save_path=output_dir / "seed_initial.png")
    visualize_trajectory(trajectory, name="SEED", save_path=output_dir / "seed_trajectory.png")
    create_animation(trajectory, name="SEED", save_path=output_dir / "seed_animation.gif")

    for category_name, patterns in get_all_patterns().items():
        logger.info("Category: %s", category_name)

        for pattern_name, pattern in patterns.items():
            grid_size = (20, 20)
            gol = GameOfLife(grid_size)
            initial_state = place_pattern(new_grid(grid_size), pattern)
            trajectory = gol.simulate(initial_state, 30)

            visualize_trajectory(
                trajectory,
                name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_trajectory.png",
                figsize=(16, 4),
            )
            logger.info("  %s: population %d -> %d", pattern_name,
                        population(trajectory[0]), population(trajectory[-1]))

    logger.info("All samples saved to %s", output_dir.absolute())


if __name__ == "__main__":
    main()
