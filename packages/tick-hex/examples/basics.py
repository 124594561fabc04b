"""Hex grid basics -- build a map, wall it, and look around.

Demonstrates:
- Creating a hexagon-shaped grid with a default payload
- Copy-on-write edits with set_passable
- Pathfinding, reachability and visibility queries

Run: python -m examples.basics
"""

from tick_hex import (
    CubeCoord,
    GridConfig,
    Hexagon,
    create_grid,
    find_path,
    get_obstacles,
    get_reachable,
    get_visible_cells,
    set_passable,
)


def main() -> None:
    print("=== Hex Basics ===\n")

    grid = create_grid(Hexagon(4), GridConfig(default_data={"terrain": "grass"}))
    print(f"Created a radius-4 hexagon with {len(grid)} cells.")

    # A short wall east of the origin.
    for c in (CubeCoord(1, -2, 1), CubeCoord(1, -1, 0), CubeCoord(1, 0, -1)):
        grid = set_passable(grid, c, False)
    print(f"Obstacles: {len(get_obstacles(grid))}")

    start, goal = CubeCoord(0, 0, 0), CubeCoord(3, -2, -1)
    path = find_path(grid, start, goal)
    if path is None:
        print("No path.")
    else:
        steps = " -> ".join(f"({c.x},{c.y},{c.z})" for c in path)
        print(f"Path ({len(path) - 1} steps): {steps}")

    print(f"Reachable in 2 moves: {len(get_reachable(grid, start, 2))} cells")
    print(f"Visible from origin:  {len(get_visible_cells(grid, start))} cells")


if __name__ == "__main__":
    main()
