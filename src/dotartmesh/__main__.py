"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotartmesh.controller.estimator import estimate_print
from dotartmesh.controller.mesher import MeshAssembler
from dotartmesh.controller.statistics import calculate_mesh_stats
from dotartmesh.exceptions import DotArtMeshError
from dotartmesh.logging_config import setup_logging
from dotartmesh.model.parameters import ParameterLibrary
from dotartmesh.model.pattern import PatternGrid

logger = logging.getLogger(__name__)


def read_pattern(filepath: str) -> PatternGrid:
    """
    Read a pattern drawn with '#'/'1' (filled) and '.'/'0'/space (empty), one row per line.

    Only truly empty lines are skipped; a row of spaces is an empty row.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        rows = [line.rstrip("\r\n") for line in f]
    rows = [row for row in rows if row]
    return PatternGrid.from_rows(rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotartmesh",
        description="Generate a cube mesh from a dot pattern and report statistics and print estimates.",
    )
    parser.add_argument("pattern", help="Text file with one pattern row per line.")
    parser.add_argument("--preset", default="default", help="Parameter preset name (default: %(default)s).")
    parser.add_argument("--presets", metavar="FILE", help="JSON file with additional presets.")
    parser.add_argument("--cube-size", type=float, help="Cube width/depth in mm.")
    parser.add_argument("--cube-height", type=float, help="Cube height in mm.")
    parser.add_argument("--spacing", type=float, help="Gap between cubes in mm.")
    parser.add_argument("--base-thickness", type=float, help="Base plate thickness in mm.")
    parser.add_argument("--no-base", action="store_true", help="Do not generate a base plate.")
    parser.add_argument("--no-optimize", action="store_true", help="Keep hidden faces between cubes.")
    parser.add_argument("--merge", action="store_true", help="Merge cubes into one object (with --no-optimize).")
    parser.add_argument("--chamfer", type=float, metavar="SIZE", help="Apply the cosmetic chamfer of SIZE mm.")
    parser.add_argument("--preview", action="store_true", help="Show the mesh in a PyVista window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        library = ParameterLibrary()
        if args.presets:
            library.load_file(args.presets)

        params = library.get_preset(args.preset)
        if params is None:
            raise DotArtMeshError(
                f"Unknown preset '{args.preset}'. Available: {', '.join(library.get_names())}"
            )

        overrides = {
            "cube_size": args.cube_size,
            "cube_height": args.cube_height,
            "spacing": args.spacing,
            "base_thickness": args.base_thickness,
        }
        changes = {k: v for k, v in overrides.items() if v is not None}
        if args.no_base:
            changes["generate_base"] = False
        if args.no_optimize:
            changes["optimize_mesh"] = False
        if args.merge:
            changes["merge_adjacent_faces"] = True
        if args.chamfer is not None:
            changes["chamfer_edges"] = True
            changes["chamfer_size"] = args.chamfer
        params = params.replace(**changes)

        grid = read_pattern(args.pattern)
        mesh = MeshAssembler().assemble(grid, params)

    except (DotArtMeshError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    stats = calculate_mesh_stats(mesh)
    estimate = estimate_print(grid, params)

    print(f"Pattern:        {grid.width} x {grid.height} ({grid.occupied_count} filled)")
    print(f"Vertices:       {stats.vertex_count}")
    print(f"Triangles:      {stats.face_count}")
    print(f"Objects:        {stats.cube_count}")
    print(f"File size:      ~{stats.file_size_estimate / 1024:.1f} KB")
    print(f"Print time:     {estimate.print_time_label}")
    print(f"Material:       {estimate.material_label}")
    print(f"Cost:           {estimate.cost_label}")

    if args.preview:
        from dotartmesh.view.vtk_utils import VtkUtils
        VtkUtils.show(mesh)

    return 0


if __name__ == "__main__":
    sys.exit(main())
