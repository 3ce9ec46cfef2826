"""Interactive multi-select list of commits, filtered as the user types."""

import logging
from typing import List, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.styles import Style

from . import Entry, filter_entries
from ..typing import Cancelled, Commit, Selected, SelectionResult

# Get module logger
logger = logging.getLogger(__name__)

INDICATOR = ">"

STYLE = Style.from_dict({
    "question": "bold",
    "dim": "#888888",
    "included": "ansigreen",
    "separator": "#888888 italic",
    "cursor": "reverse",
    "selected": "ansicyan",
    "hint": "#888888",
})


class CommitPicker:
    """State and prompt_toolkit application behind the commit picker.

    Selection is kept across filter changes; commits come back in the order
    they were toggled on.
    """

    def __init__(self, entries: List[Entry], message: str = "Select commits to cherry-pick",
                 rows: int = 20):
        self.entries = entries
        self.message = message
        self.rows = rows
        self.selected: List[Commit] = []
        self.visible: List[Entry] = list(entries)
        self.cursor = 0  # index into self.visible, always on a commit entry when one is visible
        self.search = Buffer(multiline=False, on_text_changed=self._on_text_changed)
        self._move_to_commit(0, 1)

    def _on_text_changed(self, buffer: Buffer) -> None:
        self.apply_filter(buffer.text)

    def apply_filter(self, typed: str) -> None:
        self.visible = filter_entries(self.entries, typed)
        self.cursor = 0
        self._move_to_commit(0, 1)

    def _move_to_commit(self, start: int, step: int) -> None:
        index = start
        while 0 <= index < len(self.visible):
            if not self.visible[index].is_separator:
                self.cursor = index
                return
            index += step

    def move(self, step: int) -> None:
        """Move the cursor to the next commit above (-1) or below (+1)."""
        current = self.cursor
        self._move_to_commit(self.cursor + step, step)
        if self.cursor == current:
            logger.debug("Cursor already at the edge of the list")

    def current(self) -> Optional[Commit]:
        if not self.visible:
            return None
        return self.visible[self.cursor].commit

    def toggle(self) -> None:
        """Select the commit under the cursor, or unselect it if selected."""
        commit = self.current()
        if commit is None:
            return
        if commit in self.selected:
            self.selected.remove(commit)
        else:
            self.selected.append(commit)

    def result(self) -> Selected:
        return Selected(commits=list(self.selected))

    def _page(self) -> List[Entry]:
        start = max(0, self.cursor - self.rows + 1)
        return self.visible[start:start + self.rows]

    def _render_choices(self) -> StyleAndTextTuples:
        if not self.visible:
            return [("class:hint", "  No matching commits\n")]

        tokens: StyleAndTextTuples = []
        cursor_entry = self.visible[self.cursor]
        for entry in self._page():
            if entry.is_separator:
                tokens.append(("", "  "))
                tokens.extend(entry.fragments)
                tokens.append(("", "\n"))
                continue
            pointer = INDICATOR if entry is cursor_entry else " "
            mark = "◉" if entry.commit in self.selected else "○"
            mark_style = "class:selected" if entry.commit in self.selected else ""
            tokens.append(("class:cursor" if entry is cursor_entry else "", pointer))
            tokens.append((mark_style, f" {mark} "))
            for i, fragment in enumerate(entry.fragments):
                if i:
                    tokens.append(("", " "))
                tokens.append(fragment)
            tokens.append(("", "\n"))
        return tokens

    def _render_hint(self) -> StyleAndTextTuples:
        return [("class:hint",
                 f"{len(self.selected)} selected  "
                 "(type to filter, <tab> toggle, <enter> submit, <esc> cancel)")]

    def _key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("up")
        def _up(event: KeyPressEvent) -> None:
            self.move(-1)

        @kb.add("down")
        def _down(event: KeyPressEvent) -> None:
            self.move(1)

        @kb.add("tab")
        def _toggle(event: KeyPressEvent) -> None:
            self.toggle()

        @kb.add("enter")
        def _submit(event: KeyPressEvent) -> None:
            event.app.exit(result=self.result())

        @kb.add("c-c")
        @kb.add("escape", eager=True)
        def _cancel(event: KeyPressEvent) -> None:
            event.app.exit(result=Cancelled())

        return kb

    def application(self) -> "Application[SelectionResult]":
        prompt = VSplit([
            Window(FormattedTextControl([("class:question", f"? {self.message} ")]),
                   dont_extend_width=True),
            Window(BufferControl(buffer=self.search), height=1),
        ])
        container = HSplit([
            prompt,
            Window(FormattedTextControl(self._render_choices), dont_extend_height=True),
            Window(FormattedTextControl(self._render_hint), height=1),
        ])
        return Application(
            layout=Layout(container, focused_element=self.search),
            key_bindings=self._key_bindings(),
            style=STYLE,
            full_screen=False,
            erase_when_done=True,
        )

    def run(self) -> SelectionResult:
        """Show the picker and block until the user submits or cancels."""
        return self.application().run()


def pick_commits(entries: List[Entry], rows: int) -> SelectionResult:
    """Let the user pick commits from entries."""
    return CommitPicker(entries, rows=rows).run()
