"""Command-line interface for Ramachandran plots."""

import argparse
import logging
import sys
from typing import List, Optional, Set, Tuple

from tqdm import tqdm

from ...core.domain.errors import RamachandranError
from ...core.domain.models.plot_point import TaggedPoint
from ...core.domain.models.plot_settings import PlotSettings
from ...core.domain.models.residue_selector import ResidueSelector
from ...core.domain.models.structure import Structure
from ...core.services.backbone_scanner import BackboneScanner
from ...core.services.plot_assembler import PlotAssembler
from ...core.services.residue_filter import ResidueFilter
from ...infrastructure.adapters.matplotlib_renderer import MatplotlibRenderer
from ...infrastructure.adapters.mdtraj_adapter import MDTrajAdapter
from ...infrastructure.repositories.structure_repository import StructureRepository

DEFAULT_TITLE = "Ramachandran plot"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger("ramaplot")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Plot backbone phi/psi dihedrals of a protein structure",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("structure", help="PDB file, or trajectory with --topology")
    parser.add_argument("output", help="Output image name; .png is appended")
    parser.add_argument(
        "--topology", help="Topology file for coordinate-only trajectories"
    )
    parser.add_argument(
        "--chains",
        nargs="*",
        default=[],
        help="Chain ids to include, as AB or A B (default: all)",
    )
    parser.add_argument(
        "--residues",
        nargs="+",
        type=int,
        help="Residue ids; two values are also a range, with -1 as open end",
    )
    parser.add_argument("--title", help=f"Plot title (default: {DEFAULT_TITLE!r})")
    parser.add_argument(
        "--tag",
        nargs="*",
        type=int,
        default=[],
        help="Indices of up to four dihedral sites to highlight",
    )
    parser.add_argument(
        "--split",
        nargs="+",
        metavar="RESNAME",
        help="Plot these residues and all others as two separate series",
    )
    frames = parser.add_mutually_exclusive_group()
    frames.add_argument("--frame", type=int, default=0, help="Frame to plot")
    frames.add_argument(
        "--all-frames", action="store_true", help="Plot every frame as its own series"
    )
    parser.add_argument("--config", help="JSON file with plot settings")
    parser.add_argument(
        "--workers", type=int, default=1, help="Series evaluated in parallel"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    return parser


def load_structure(path: str, topology: Optional[str] = None) -> Structure:
    """Read a PDB with Biopython, anything else through MDTraj."""
    if topology is None and path.lower().endswith((".pdb", ".ent")):
        return StructureRepository().load(path)
    adapter = MDTrajAdapter()
    traj = adapter.load(path, top=topology)
    frames = list(
        tqdm(adapter.frames(traj), total=traj.n_frames, desc="Reading frames")
    )
    return Structure(
        atoms=adapter.atom_sequence(traj.topology), frames=frames, source_file=path
    )


def chain_ids(chains: List[str]) -> Set[str]:
    """Split chain arguments into one-letter ids, so AB means A and B."""
    return {c for arg in chains for c in arg}


def build_plot(
    structure: Structure, args: argparse.Namespace, assembler: PlotAssembler
) -> Tuple[List[List[TaggedPoint]], PlotSettings]:
    """Scan, evaluate and tag the structure according to the CLI options."""
    selector = ResidueSelector(args.residues) if args.residues else None
    sites = BackboneScanner().scan(structure.atoms, chain_ids(args.chains), selector)
    title = args.title or DEFAULT_TITLE
    tags = set(args.tag or ())

    if args.split:
        residue_filter = ResidueFilter()
        (present, present_map), (absent, absent_map) = residue_filter.split(
            sites, args.split
        )
        tag_sets = [
            residue_filter.remap_tags(tags, present_map),
            residue_filter.remap_tags(tags, absent_map),
        ]
        series = assembler.assemble(
            [present, absent], structure.frame(args.frame), tag_sets
        )
        return series, _settings(args, title, multi=True)

    if args.all_frames:
        series = assembler.assemble_frames(sites, structure.frames, tags)
        return series, _settings(args, title, multi=True)

    series = [assembler.assemble_single(sites, structure.frame(args.frame), tags)]
    return series, _settings(args, title, multi=False)


def _settings(args: argparse.Namespace, title: str, multi: bool) -> PlotSettings:
    if args.config:
        return PlotSettings.from_json(args.config, title=args.title, output=args.output)
    if multi:
        return PlotSettings.multi(title, args.output)
    return PlotSettings.single(title, args.output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Ramachandran plot CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    if args.split and args.all_frames:
        parser.error("--split plots a single frame and cannot be used with --all-frames")
    logger = setup_logging(args.verbose)

    try:
        structure = load_structure(args.structure, args.topology)
        if not 0 <= args.frame < structure.n_frames:
            parser.error(
                f"--frame {args.frame} outside the {structure.n_frames} available frames"
            )
        assembler = PlotAssembler(max_workers=args.workers)
        series, settings = build_plot(structure, args, assembler)
        path = assembler.render(series, MatplotlibRenderer(), settings)
    except (RamachandranError, OSError) as e:
        logger.error("Could not build Ramachandran plot: %s", e)
        return 1

    logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
