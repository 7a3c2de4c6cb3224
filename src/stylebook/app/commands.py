# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#   Page commands for stylebook: quit + typed scroll actions.
#
# Notes:
#   - Key bindings resolve to command ids; the registry runs the command.
#   - Scroll commands carry a ScrollAction and resolve their ScrollView at
#     invoke time; they do nothing until the page is mounted.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/20/2026	Paul G. LeDuc				Type scroll commands by ScrollAction
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Protocol

if TYPE_CHECKING:
	from stylebook.ui.scroll_view import ScrollView


QUIT_COMMAND_ID = "app.quit"


class ScrollTarget(Protocol):
	"""
	What a scroll command needs from the page (ScrollView implements it).
	"""
	@property
	def mounted(self) -> bool: ...
	def scroll_pages(self, n: int) -> None: ...
	def scroll_units(self, n: int) -> None: ...
	def scroll_to(self, fraction: float) -> None: ...


ScrollProvider = Callable[[], Optional["ScrollTarget | ScrollView"]]


class ScrollAction(Enum):
	"""
	(command id, label, unit, amount). unit "moveto" treats amount as a fraction.
	"""
	PAGE_UP = ("page.page_up", "Page Up", "pages", -1)
	PAGE_DOWN = ("page.page_down", "Page Down", "pages", 1)
	LINE_UP = ("page.line_up", "Line Up", "units", -1)
	LINE_DOWN = ("page.line_down", "Line Down", "units", 1)
	TOP = ("page.top", "Top", "moveto", 0)
	BOTTOM = ("page.bottom", "Bottom", "moveto", 1)

	def __init__(self, command_id: str, label: str, unit: str, amount: int) -> None:
		self.command_id = command_id
		self.label = label
		self.unit = unit
		self.amount = amount

	def apply(self, target: ScrollTarget) -> None:
		if self.unit == "moveto":
			target.scroll_to(float(self.amount))
		elif self.unit == "pages":
			target.scroll_pages(self.amount)
		else:
			target.scroll_units(self.amount)


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	Either a plain handler (quit) or a ScrollAction bound to a provider.
	"""
	id: str
	label: str
	handler: Optional[Callable[[], None]] = None
	action: Optional[ScrollAction] = None
	scroll_provider: Optional[ScrollProvider] = None

	def target(self) -> Optional[ScrollTarget]:
		if self.scroll_provider is None:
			return None
		target = self.scroll_provider()
		if target is None or not target.mounted:
			return None
		return target

	def is_enabled(self) -> bool:
		if self.action is None:
			return self.handler is not None
		return self.target() is not None

	def run(self) -> bool:
		"""
		Run the command; False when it was disabled.
		"""
		if self.action is None:
			if self.handler is None:
				return False
			self.handler()
			return True

		target = self.target()
		if target is None:
			return False
		self.action.apply(target)
		return True


class CommandRegistry:
	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")
		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")
		if (command.handler is None) == (command.action is None):
			raise ValueError(f"Command {command.id!r} needs exactly one of handler or action")

		self._commands[command.id] = command

	def register_scroll_actions(self, scroll_provider: ScrollProvider) -> None:
		for action in ScrollAction:
			self.register(Command(
				id=action.command_id,
				label=action.label,
				action=action,
				scroll_provider=scroll_provider,
			))

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def invoke(self, command_id: str) -> bool:
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")
		return command.run()


def register_default_commands(
	registry: CommandRegistry,
	*,
	quit_fn: Callable[[], None],
	scroll_provider: ScrollProvider,
) -> None:
	"""
	Quit plus every ScrollAction against the page's ScrollView.
	"""
	registry.register(Command(id=QUIT_COMMAND_ID, label="Quit", handler=quit_fn))
	registry.register_scroll_actions(scroll_provider)
