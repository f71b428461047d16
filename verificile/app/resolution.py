"""Interactive remediation of a single extension anomaly.

The resolver walks the operator through an explicit finite-state machine::

    CHOOSE_ACTION -> [CUSTOM_NAME] -> COLLISION_CHECK -> [COLLISION_CUSTOM_NAME]
                  -> CONFIRM -> APPLY

Every path ends in exactly one :data:`ResolutionOutcome`: ``Fixed`` when the
file was renamed, ``NotFixed`` with a reason otherwise. In forensic mode the
machine starts in ``FORENSIC`` and ends immediately without prompting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from verificile.app.ports import PromptPort, RenameLogPort
from verificile.core.classifier import FileRecord
from verificile.core.errors import (
    PathExhaustedError,
    RenameFailedError,
    UnresolvableCollisionError,
)
from verificile.core.models import Fixed, NotFixed, NotFixedReason, ResolutionOutcome
from verificile.core.paths import resolve_fix_target, split_name

logger = logging.getLogger(__name__)


class ResolutionState(str, Enum):
    """States of the interactive resolution machine."""

    CHOOSE_ACTION = "choose_action"
    CUSTOM_NAME = "custom_name"
    COLLISION_CHECK = "collision_check"
    COLLISION_CUSTOM_NAME = "collision_custom_name"
    CONFIRM = "confirm"
    APPLY = "apply"
    FORENSIC = "forensic"
    DONE = "done"


class Action(str, Enum):
    """First-level remediation choices."""

    FIX_EXTENSION = "1"
    SKIP = "2"
    APPEND_EXTENSION = "3"
    CUSTOM_RENAME = "4"


class CollisionAction(str, Enum):
    """Choices offered when the rename target already exists."""

    AUTO_SUFFIX = "1"
    CUSTOM_RENAME = "2"
    OVERWRITE = "3"
    SKIP = "4"


CONFIRM_ANSWERS = {"y"}


def _default_renamer(source: Path, target: Path) -> None:
    source.replace(target)


@dataclass(slots=True)
class _Attempt:
    """Mutable scratch state for one pass through the machine."""

    record: FileRecord
    original: Path
    primary: str
    target: Path | None = None
    description: str = ""
    outcome: ResolutionOutcome | None = None
    trail: list[ResolutionState] = field(default_factory=list)

    def finish(self, outcome: ResolutionOutcome) -> ResolutionState:
        self.outcome = outcome
        return ResolutionState.DONE


class InteractiveResolver:
    """Drive an operator through fixing one anomaly.

    Args:
        prompter: Operator I/O.
        rename_log: Sink for successful renames.
        forensic: When True, never prompt and never touch the filesystem.
        renamer: Callable performing the atomic rename (defaults to ``Path.replace``).
    """

    def __init__(
        self,
        prompter: PromptPort,
        rename_log: RenameLogPort,
        *,
        forensic: bool = False,
        renamer: Callable[[Path, Path], None] | None = None,
    ) -> None:
        self.prompter = prompter
        self.rename_log = rename_log
        self.forensic = forensic
        self._renamer = renamer or _default_renamer
        self._handlers: dict[ResolutionState, Callable[[_Attempt], ResolutionState]] = {
            ResolutionState.CHOOSE_ACTION: self._choose_action,
            ResolutionState.CUSTOM_NAME: self._custom_name,
            ResolutionState.COLLISION_CHECK: self._collision_check,
            ResolutionState.COLLISION_CUSTOM_NAME: self._collision_custom_name,
            ResolutionState.CONFIRM: self._confirm,
            ResolutionState.APPLY: self._apply,
            ResolutionState.FORENSIC: self._forensic,
        }
        self.last_trail: list[ResolutionState] = []

    def resolve(self, record: FileRecord) -> ResolutionOutcome:
        """Run the state machine for ``record`` and return its outcome."""

        if not record.expected:
            raise ValueError(f"Cannot resolve {record.path}: no expected extensions")

        attempt = _Attempt(
            record=record,
            original=Path(record.path),
            primary=record.expected[0],
        )
        state = ResolutionState.FORENSIC if self.forensic else ResolutionState.CHOOSE_ACTION

        while state is not ResolutionState.DONE:
            attempt.trail.append(state)
            state = self._handlers[state](attempt)

        self.last_trail = attempt.trail
        assert attempt.outcome is not None
        logger.debug(
            "Resolved %s via %s -> %s",
            record.path,
            [s.value for s in attempt.trail],
            attempt.outcome,
        )
        return attempt.outcome

    # ------------------------------------------------------------------#
    # Presentation helpers
    # ------------------------------------------------------------------#

    def _describe(self, attempt: _Attempt, heading: str) -> None:
        record = attempt.record
        self.prompter.show(f"\n{heading} {record.path}", style="heading")
        self.prompter.show(f"Current extension: {record.actual_extension}")
        self.prompter.show(f"Expected extension(s): {record.expected_joined}")

    def _read_name(self, prompt_label: str, current: str) -> str:
        self.prompter.show(f"{prompt_label} {current}", style="notice")
        self.prompter.show("Enter new filename (will be saved in same directory):", style="notice")
        return self.prompter.ask(">", default="").strip()

    @staticmethod
    def _is_valid_name(name: str) -> bool:
        return name not in {".", ".."} and "/" not in name and "\\" not in name

    # ------------------------------------------------------------------#
    # States
    # ------------------------------------------------------------------#

    def _forensic(self, attempt: _Attempt) -> ResolutionState:
        self._describe(attempt, "Anomaly found:")
        self.prompter.show("[FORENSIC MODE] No file modifications allowed", style="forensic")
        return attempt.finish(NotFixed(NotFixedReason.FORENSIC))

    def _choose_action(self, attempt: _Attempt) -> ResolutionState:
        self._describe(attempt, "Fix anomaly:")
        base_name = attempt.original.name
        primary = attempt.primary
        self.prompter.show("\nChoose action:")
        self.prompter.show(f"  1) Fix extension (change to '{primary}') [default]")
        self.prompter.show("  2) Skip this file")
        self.prompter.show(f"  3) Append extension (result: '{base_name}.{primary}')")
        self.prompter.show("  4) Custom rename (edit filename)")

        choice = self.prompter.ask("Enter choice [1-4]", default=Action.FIX_EXTENSION.value).strip()
        choice = choice or Action.FIX_EXTENSION.value

        if choice == Action.FIX_EXTENSION.value:
            stem, _ = split_name(base_name)
            attempt.target = attempt.original.parent / f"{stem}.{primary}"
            attempt.description = f"Changing extension to '{primary}'"
            return ResolutionState.COLLISION_CHECK

        if choice == Action.SKIP.value:
            self.prompter.show("Skipping this file.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.SKIPPED))

        if choice == Action.APPEND_EXTENSION.value:
            attempt.target = attempt.original.parent / f"{base_name}.{primary}"
            attempt.description = f"Appending extension '.{primary}'"
            return ResolutionState.COLLISION_CHECK

        if choice == Action.CUSTOM_RENAME.value:
            return ResolutionState.CUSTOM_NAME

        self.prompter.show("Invalid choice. Skipping this file.", style="error")
        return attempt.finish(NotFixed(NotFixedReason.INVALID_CHOICE, detail=choice))

    def _custom_name(self, attempt: _Attempt) -> ResolutionState:
        new_name = self._read_name("Current filename:", attempt.original.name)
        if not new_name:
            self.prompter.show("No new name provided. Skipping this file.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.EMPTY_NAME))
        if not self._is_valid_name(new_name):
            self.prompter.show(
                f"Invalid filename '{new_name}'. Skipping this file.", style="error"
            )
            return attempt.finish(NotFixed(NotFixedReason.INVALID_NAME, detail=new_name))

        attempt.target = attempt.original.parent / new_name
        attempt.description = f"Renaming to '{new_name}'"
        return ResolutionState.COLLISION_CHECK

    def _collision_check(self, attempt: _Attempt) -> ResolutionState:
        target = attempt.target
        assert target is not None

        if target == attempt.original:
            self.prompter.show("New name is identical to the current one. Skipping.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.UNCHANGED))

        if not target.exists():
            return ResolutionState.CONFIRM

        self.prompter.show(f"\nWarning: Target file already exists: {target}", style="error")
        self.prompter.show("Choose action:")
        self.prompter.show("  1) Auto-rename with suffix [default]")
        self.prompter.show("  2) Custom rename (edit filename)")
        self.prompter.show("  3) Overwrite existing file")
        self.prompter.show("  4) Skip fixing this file")

        choice = self.prompter.ask(
            "Enter choice [1-4]", default=CollisionAction.AUTO_SUFFIX.value
        ).strip()
        choice = choice or CollisionAction.AUTO_SUFFIX.value

        if choice == CollisionAction.AUTO_SUFFIX.value:
            _, target_ext = split_name(target.name)
            try:
                attempt.target = resolve_fix_target(attempt.original, target_ext[1:])
            except PathExhaustedError as exc:
                logger.warning("%s", exc)
                self.prompter.show(
                    "Error: Could not find an available filename. Skipping.", style="error"
                )
                return attempt.finish(NotFixed(NotFixedReason.PATH_EXHAUSTED, detail=str(exc)))
            if attempt.target == attempt.original:
                self.prompter.show(
                    "New name is identical to the current one. Skipping.", style="warning"
                )
                return attempt.finish(NotFixed(NotFixedReason.UNCHANGED))
            attempt.description = f"Auto-renaming to '{attempt.target.name}'"
            return ResolutionState.CONFIRM

        if choice == CollisionAction.CUSTOM_RENAME.value:
            return ResolutionState.COLLISION_CUSTOM_NAME

        if choice == CollisionAction.OVERWRITE.value:
            attempt.description = f"Overwriting existing file '{target.name}'"
            return ResolutionState.CONFIRM

        if choice == CollisionAction.SKIP.value:
            self.prompter.show("Skipping this file.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.SKIPPED))

        self.prompter.show("Invalid choice. Skipping this file.", style="error")
        return attempt.finish(NotFixed(NotFixedReason.INVALID_CHOICE, detail=choice))

    def _collision_custom_name(self, attempt: _Attempt) -> ResolutionState:
        assert attempt.target is not None
        new_name = self._read_name("Current target filename:", attempt.target.name)
        if not new_name:
            self.prompter.show("No new name provided. Skipping this file.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.EMPTY_NAME))
        if not self._is_valid_name(new_name):
            self.prompter.show(
                f"Invalid filename '{new_name}'. Skipping this file.", style="error"
            )
            return attempt.finish(NotFixed(NotFixedReason.INVALID_NAME, detail=new_name))

        target = attempt.original.parent / new_name
        if target == attempt.original:
            self.prompter.show("New name is identical to the current one. Skipping.", style="warning")
            return attempt.finish(NotFixed(NotFixedReason.UNCHANGED))
        # No second collision round: a taken custom name ends the attempt.
        if target.exists():
            exc = UnresolvableCollisionError(target)
            self.prompter.show("Error: This filename also exists. Skipping.", style="error")
            return attempt.finish(
                NotFixed(NotFixedReason.UNRESOLVABLE_COLLISION, detail=str(exc))
            )

        attempt.target = target
        attempt.description = f"Custom renaming to '{new_name}'"
        return ResolutionState.CONFIRM

    def _confirm(self, attempt: _Attempt) -> ResolutionState:
        self.prompter.show(attempt.description, style="notice")
        self.prompter.show(f"Renaming: {attempt.original} → {attempt.target}")

        answer = self.prompter.ask("Proceed? [Y/n]", default="Y").strip() or "Y"
        if answer.lower() in CONFIRM_ANSWERS:
            return ResolutionState.APPLY

        self.prompter.show("Operation cancelled.", style="warning")
        return attempt.finish(NotFixed(NotFixedReason.CANCELLED))

    def _apply(self, attempt: _Attempt) -> ResolutionState:
        source = attempt.original
        target = attempt.target
        assert target is not None

        try:
            self._renamer(source, target)
        except OSError as os_exc:
            exc = RenameFailedError(source, target, os_exc)
            logger.warning("%s", exc)
            self.prompter.show(f"Error: Failed to rename file ({os_exc}).", style="error")
            if not source.exists():
                logger.error("File %s is missing after a failed rename", source)
                self.prompter.show(
                    f"Error: {source} no longer exists after the failed rename.", style="error"
                )
            return attempt.finish(NotFixed(NotFixedReason.RENAME_FAILED, detail=str(exc)))

        self.rename_log.append(source, target)
        self.prompter.show("Success! File renamed.", style="success")
        return attempt.finish(Fixed(new_path=target))
