import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_astar' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_astar.config import SOLVERS, SolveConfig, RenderConfig
from maze_astar.core.errors import MazeError

logger = logging.getLogger("maze_astar")

BINARY_EXT = ".maze"

# solve exit codes besides 0 (solved) and 1 (error)
EXIT_UNSOLVED = 2
EXIT_ABORTED = 3


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def load_any(path: str):
    """Loads a maze, binary for '.maze' files, text otherwise."""
    if path.endswith(BINARY_EXT):
        from maze_astar.io.serializer import MazeSerializer
        maze, meta = MazeSerializer.load(path)
        logger.debug(f"Meta: {meta}")
        return maze

    from maze_astar.io.text_format import load_maze
    return load_maze(path)


def save_any(maze, path: str, meta=None):
    if path.endswith(BINARY_EXT):
        from maze_astar.io.serializer import MazeSerializer
        MazeSerializer.save(maze, path, meta=meta, compress=True)
    else:
        from maze_astar.io.text_format import save_maze
        save_maze(maze, path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze A*: shortest paths through grid mazes")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve a maze file")
    solve_parser.add_argument("input_file", help="Path to maze file (.maze = binary, otherwise text)")
    solve_parser.add_argument("--algo", type=str, default="astar", choices=list(SOLVERS), help="Solver algorithm")
    solve_parser.add_argument("--reverse", action="store_true", help="Search from the end back to the start")
    solve_parser.add_argument("--output", "-o", type=str, help="Write the path as move letters to this file")
    solve_parser.add_argument("--print", "-p", dest="print_maze", action="store_true", help="Print the solved maze as ASCII art")
    solve_parser.add_argument("--explored", action="store_true", help="Mark explored cells when printing")
    solve_parser.add_argument("--max-frontier", type=int, default=None, help="Abort if the frontier grows past this many nodes")
    solve_parser.add_argument("--record-events", type=str, help="Save search events to binary file")
    solve_parser.add_argument("--visual", action="store_true", help="Show visualization")
    solve_parser.add_argument("--record", action="store_true", help="Record video (implies --visual)")

    # Render Command
    render_parser = subparsers.add_parser("render", help="Print a maze as ASCII art")
    render_parser.add_argument("input_file", help="Path to maze file")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a random maze")
    gen_parser.add_argument("--width", type=int, default=20, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=20, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--braid", type=float, default=0.0, help="Braid Factor (0.0 - 1.0)")
    gen_parser.add_argument("--out", type=str, required=True, help="Output file path")

    # Convert Command
    conv_parser = subparsers.add_parser("convert", help="Convert between text and binary maze files")
    conv_parser.add_argument("input_file")
    conv_parser.add_argument("output_file")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Compare solvers on a generated maze")
    bench_parser.add_argument("--size", type=int, default=100, help="Benchmark size")
    bench_parser.add_argument("--braid", type=float, default=0.1, help="Braid Factor (0.0 - 1.0)")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def cmd_solve(args) -> int:
    from maze_astar.core.nodes import NodeCollection
    from maze_astar.core.events import EventWriter

    logger.info(f"Loading {args.input_file}...")
    maze = load_any(args.input_file)
    logger.info(f"Loaded {maze.width}x{maze.height} maze, start {tuple(maze.start)}, end {tuple(maze.end)}")

    visual = args.visual or args.record
    config = SolveConfig(algo=args.algo, reverse=args.reverse,
                         progress_interval=1 if visual else 100,
                         max_capacity=args.max_frontier)

    evt_writer = None
    if args.record_events:
        evt_writer = EventWriter(args.record_events)
        try:
            evt_writer.write_header(maze.width, maze.height)
        except ValueError:
            evt_writer.close()
            raise
        logger.info(f"Recording events to {args.record_events}...")

    solver = config.make_solver(maze, event_writer=evt_writer)
    out = NodeCollection(maze.width * maze.height)

    logger.info(f"Solving with {args.algo.upper()}{' (reverse)' if args.reverse else ''}...")
    t0 = time.time()
    finished = True
    try:
        if visual:
            from maze_astar.viz.renderer import Renderer
            renderer = Renderer(maze, solver=solver, config=RenderConfig(record=args.record))
            renderer.solver_iter = solver.run(out)
            renderer.init_window()
            renderer.run_loop()
            finished = renderer.solve_finished
        else:
            for status in solver.run(out):
                logger.debug(status)
    finally:
        if evt_writer:
            evt_writer.close()
            logger.info(f"Saved events to {args.record_events}")

    logger.info(f"Expanded {solver.expanded_count} nodes in {time.time() - t0:.4f}s")

    if not finished:
        logger.warning("Visualization closed before the search finished.")
        return EXIT_ABORTED

    if args.print_maze:
        from maze_astar.viz.ascii import render
        explored = [node.point for node in out] if args.explored else None
        print(render(maze, path=solver.path, explored=explored), end="")

    if not solver.solved:
        logger.warning("No path from start to end.")
        return EXIT_UNSOLVED

    logger.info(f"Path Length: {len(solver.path) - 1}")
    if args.output:
        from maze_astar.io.text_format import write_path
        with open(args.output, "w") as f:
            write_path(out, f, reverse=args.reverse)
        logger.info(f"Path written to {args.output}")
    return 0


def cmd_render(args) -> int:
    from maze_astar.viz.ascii import render
    maze = load_any(args.input_file)
    print(render(maze), end="")
    return 0


def cmd_generate(args) -> int:
    from maze_astar.core.maze import make_maze
    from maze_astar.algo.dfs import RecursiveBacktracker
    from maze_astar.core.complexity import MazePostProcessor

    logger.info(f"Generating {args.width}x{args.height} maze...")
    maze = make_maze((args.width, args.height), (0, 0), (args.width - 1, args.height - 1))
    RecursiveBacktracker(maze, seed=args.seed).run_all()

    if args.braid > 0.0:
        logger.info(f"Braiding maze (factor={args.braid})...")
        removed = MazePostProcessor.braid(maze, factor=args.braid, seed=args.seed)
        logger.info(f"Removed {removed} dead ends.")

    logger.info(f"Stats: {MazePostProcessor.calculate_stats(maze)}")

    logger.info(f"Saving maze to {args.out}...")
    save_any(maze, args.out, meta={"algo": "dfs", "seed": args.seed, "braid": args.braid})
    logger.info("Save complete.")
    return 0


def cmd_convert(args) -> int:
    maze = load_any(args.input_file)
    save_any(maze, args.output_file)
    logger.info(f"Converted {args.input_file} -> {args.output_file}")
    return 0


def cmd_benchmark(args) -> int:
    from maze_astar.core.maze import make_maze
    from maze_astar.algo.dfs import RecursiveBacktracker
    from maze_astar.core.complexity import MazePostProcessor
    from maze_astar.core.nodes import NodeCollection

    logger.info(f"Running Solver Benchmark (Size: {args.size}x{args.size}, braid {args.braid})...")
    maze = make_maze((args.size, args.size), (0, 0), (args.size - 1, args.size - 1))
    RecursiveBacktracker(maze, seed=args.seed).run_all()
    if args.braid > 0:
        MazePostProcessor.braid(maze, factor=args.braid, seed=args.seed)

    print(f"\n{'ALGORITHM':<10} | {'TIME (s)':<10} | {'PATH LEN':<10} | {'EXPANDED':<10}")
    print("-" * 50)

    for name, cls in SOLVERS.items():
        solver = cls(maze)
        t_start = time.time()
        solver.solve(NodeCollection(maze.width * maze.height))
        duration = time.time() - t_start

        path_len = len(solver.path) - 1 if solver.solved else -1
        print(f"{name:<10} | {duration:<10.4f} | {path_len:<10} | {solver.expanded_count:<10}")
    return 0


COMMANDS = {
    "solve": cmd_solve,
    "render": cmd_render,
    "generate": cmd_generate,
    "convert": cmd_convert,
    "benchmark": cmd_benchmark,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    logger.debug(f"Running command: {args.command}")
    try:
        return COMMANDS[args.command](args)
    except (MazeError, ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
