"""
Command line surface for project, asset and model operations.

    hyuga projects create|list|show|delete
    hyuga assets add|remove|list
    hyuga models import|list
    hyuga export PROJECT_ID [--output FILE] [--layout full_page|sheet]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .common.logging_utils import configure_logging
from .common.paths import StorePaths
from .core.errors import HyugaError
from .core.models import AppendResult
from .export.controller import ExportConfig, export_project
from .export.wizard import AssetWizard, ImagePicker
from .layout.config import LayoutPolicy
from .storage.model_store import ModelStore
from .storage.project_repository import ProjectRepository, RemovalPolicy

logger = logging.getLogger(__name__)


class _ArgumentPicker(ImagePicker):
    """ImagePicker answering from command line arguments, in order."""

    def __init__(self, paths: Sequence[Path]):
        self._paths = list(paths)

    def pick_image(self, title: str) -> Optional[Path]:
        return self._paths.pop(0) if self._paths else None

    def pick_images(self, title: str) -> list[Path]:
        paths, self._paths = self._paths, []
        return paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hyuga", description="Hyuga scrapbook toolkit")
    parser.add_argument("--base-dir", type=Path, help="Data directory (default: $HYUGA_HOME or user config dir)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    projects = sub.add_parser("projects", help="Manage projects")
    projects_sub = projects.add_subparsers(dest="action", required=True)
    projects_sub.add_parser("create", help="Create an empty project")
    projects_sub.add_parser("list", help="List projects")
    show = projects_sub.add_parser("show", help="Show one project")
    show.add_argument("project_id")
    delete = projects_sub.add_parser("delete", help="Delete a project and its files")
    delete.add_argument("project_id")

    assets = sub.add_parser("assets", help="Manage project assets")
    assets_sub = assets.add_subparsers(dest="action", required=True)
    add = assets_sub.add_parser("add", help="Add an asset from sheet and cutout images")
    add.add_argument("project_id")
    add.add_argument("--sheet", type=Path, required=True)
    add.add_argument("--cutout", type=Path, required=True)
    add.add_argument("--model", help="Model label from the catalog")
    add.add_argument("--page", help="Page number (guessed from file names if omitted)")
    add.add_argument("--section", help="Section (guessed from file names if omitted)")
    remove = assets_sub.add_parser("remove", help="Remove an asset")
    remove.add_argument("project_id")
    remove.add_argument("asset_id")
    remove.add_argument("--swap", action="store_true", help="O(1) removal; moves the last asset into the gap")
    list_assets = assets_sub.add_parser("list", help="List assets of a project")
    list_assets.add_argument("project_id")

    models = sub.add_parser("models", help="Manage model templates")
    models_sub = models.add_subparsers(dest="action", required=True)
    imp = models_sub.add_parser("import", help="Import template images")
    imp.add_argument("paths", nargs="+", type=Path)
    models_sub.add_parser("list", help="List catalog entries")

    export = sub.add_parser("export", help="Export a project to PDF")
    export.add_argument("project_id")
    export.add_argument("--output", "-o", type=Path, help="Output PDF (default: project folder/output.pdf)")
    export.add_argument(
        "--layout",
        choices=[p.value for p in LayoutPolicy],
        default=LayoutPolicy.FULL_PAGE.value,
    )
    export.add_argument("--footer", action="store_true", help="Print a version footer on each page")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return _dispatch(args)
    except HyugaError as e:
        logger.error(str(e))
        return 1


def _dispatch(args: argparse.Namespace) -> int:
    paths = StorePaths.resolve(args.base_dir)
    repository = ProjectRepository(
        paths.projects_dir,
        removal_policy=RemovalPolicy.SWAP_LAST if getattr(args, "swap", False) else RemovalPolicy.PRESERVE_ORDER,
    )
    store = ModelStore(paths.models_dir)

    if args.command == "projects":
        if args.action == "create":
            project = repository.create()
            print(f"{project.id}\t{project.name}")
        elif args.action == "list":
            for project in repository.list():
                print(f"{project.id}\t{project.name}\t{project.created_at}\t{project.asset_count} assets")
        elif args.action == "show":
            project = repository.load(args.project_id)
            print(f"{project.name} ({project.id}) created {project.created_at}")
            for asset in project.assets:
                print(f"  {asset.id}\tpage={asset.page_number}\tsection={asset.section}")
        elif args.action == "delete":
            repository.delete(args.project_id)
        return 0

    if args.command == "assets":
        if args.action == "add":
            wizard = AssetWizard(repository, store, _ArgumentPicker([args.sheet, args.cutout]))
            try:
                outcome = wizard.add_asset(
                    args.project_id,
                    model_label=args.model,
                    page_number=args.page,
                    section=args.section,
                )
            except OSError as e:
                logger.error(f"Cannot read image: {e}")
                return 1
            if outcome is not None:
                print(outcome.asset.id)
                if outcome.result is AppendResult.ALREADY_PRESENT:
                    logger.warning(f"Asset {outcome.asset.id} was already present")
        elif args.action == "remove":
            repository.remove_asset(args.project_id, args.asset_id)
        elif args.action == "list":
            for asset in repository.load_assets(args.project_id):
                model = asset.model or "-"
                print(f"{asset.id}\tpage={asset.page_number}\tsection={asset.section}\tmodel={model}")
        return 0

    if args.command == "models":
        if args.action == "import":
            report = store.import_images(args.paths)
            for path, reason in report.failed:
                print(f"failed: {path}: {reason}", file=sys.stderr)
            return 1 if report.failed and not report.appended_count else 0
        for entry in store.list():
            print(f"{entry.label}\t{entry.reference}")
        return 0

    if args.command == "export":
        config = ExportConfig(
            output_path=args.output,
            policy=LayoutPolicy(args.layout),
            show_footer=args.footer,
        )
        result = export_project(repository, args.project_id, config)
        print(result.output_path)
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
