"""CLI application entry point."""

import os
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from skill_sync.config.loader import load_config
from skill_sync.config.schema import SyncMode
from skill_sync.errors import SyncError
from skill_sync.sync.strategies import probe_strategy
from skill_sync.sync.synchronizer import DirectorySynchronizer
from skill_sync.utils.output import (
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="sync-skills",
    help="Copy the bundled skills directory into the Codex skills folder",
    add_completion=False,
)


@app.command()
def sync(
    delete: bool = typer.Option(
        False,
        "--delete",
        help="Mirror mode: remove target files that are not in the source",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be done without making changes",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to settings file (default: ~/.config/skill-sync/config.yaml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print resolved paths and the copy mechanism on stderr",
    ),
):
    """Synchronize skills into ${CODEX_HOME:-~/.codex}/skills.

    Without --delete files are only added or overwritten. With --delete the
    target is made to match the source exactly, which requires rsync.
    """
    try:
        try:
            cfg = load_config(env=os.environ, config_path=config)
        except ValidationError as e:
            print_error("Settings validation failed:")
            err_console.print(e)
            raise typer.Exit(1)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print_error(f"Failed to load settings: {e}")
            raise typer.Exit(1)

        mode = SyncMode.MIRROR if delete else SyncMode.ADDITIVE
        strategy = probe_strategy()

        if verbose:
            print_info(f"Source: {cfg.source_dir}")
            print_info(f"Target: {cfg.target_dir}")
            print_info(f"Mode: {mode.value}")
            print_info(f"Copy mechanism: {strategy.name}")
            print_info(f"Excluded: {', '.join(cfg.exclude)}")

        if dry_run:
            print_warning("DRY RUN MODE - No changes will be made")

        synchronizer = DirectorySynchronizer(strategy)
        result = synchronizer.run(
            cfg.source_dir,
            cfg.target_dir,
            mode,
            cfg.exclude,
            dry_run=dry_run,
        )

        if result.dry_run:
            print_success(f"Would sync skills to {result.target}")
        else:
            print_success(f"Synced skills to {result.target}")

    except typer.Exit:
        raise
    except SyncError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
