"""
Interactive console session.

Builds the initial food web from typed input, reports its
characteristics and then runs the modification menu until the user
quits. Input is token based: names are single words, relations are
pairs of integers and menu choices are single characters.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

from foodweb.config.settings import FoodWebConfig
from foodweb.graph.graph_builder import GraphBuilder
from foodweb.graph.graph_mutator import GraphMutator, MutationResult
from foodweb.graph.graph_store import GraphStore
from foodweb.report.renderer import render_report, render_web
from foodweb.utils.text import normalize_name


logger = logging.getLogger("foodweb.session")

DIVIDER = "--------------------------------\n"

MENU = (
    "Web modification options:\n"
    "   o = add a new organism (expansion)\n"
    "   r = add a new predator/prey relation (supplementation)\n"
    "   x = remove an organism (extinction)\n"
    "   p = print the updated food web\n"
    "   d = display ALL characteristics for the updated food web\n"
    "   q = quit\n"
    "Enter a character (o, r, x, p, d, or q): "
)

RELATION_PROMPT = (
    "Enter the pair of indices for a predator/prey relation.\n"
    "Enter any invalid index when done (-1 2, 0 -9, 3 3, etc.).\n"
    "The format is <predator index> <prey index>: "
)


class TokenReader:
    """
    Pulls whitespace-separated tokens and single characters from a
    line-oriented stream, one line at a time.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        while not self._buffer.strip():
            line = self.stream.readline()
            if not line:
                return False
            self._buffer = line
        self._buffer = self._buffer.lstrip()
        return True

    def word(self) -> Optional[str]:
        if not self._fill():
            return None
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self) -> Optional[str]:
        if not self._fill():
            return None
        ch, self._buffer = self._buffer[0], self._buffer[1:]
        return ch

    def integer(self) -> Optional[int]:
        token = self.word()
        if token is None:
            return None
        try:
            return int(token)
        except ValueError:
            logger.warning("expected an integer, got %r", token)
            return None


class FoodWebSession:
    def __init__(
        self,
        *,
        config: FoodWebConfig,
        stdin: TextIO,
        stdout: TextIO,
        store: Optional[GraphStore] = None,
    ) -> None:
        self.config = config
        self.modes = config.modes
        self.reader = TokenReader(stdin)
        self.out = stdout
        self.store = store if store is not None else GraphStore()
        self.mutator = GraphMutator(
            store=self.store,
            modes=self.modes,
            render=render_web,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> int:
        self._print_settings()
        self._write("Welcome to the Food Web Application\n\n")
        self._write(DIVIDER + "\n")

        self._build_organisms()
        self._build_relations()

        self._write(DIVIDER + "\n")
        self._write("Initial food web complete.\n")
        self._write("Displaying characteristics for the initial food web...\n")
        self._write(render_report(self.store, modified=False))

        if not self.modes.basic:
            self._modify()

        logger.info(
            "session finished with %s organisms and %s relations",
            self.store.node_count(),
            self.store.edge_count(),
        )
        return 0

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _print_settings(self) -> None:
        self._write("Program Settings:\n")
        self._write(f"  basic mode = {_on_off(self.modes.basic)}\n")
        self._write(f"  debug mode = {_on_off(self.modes.debug)}\n")
        self._write(f"  quiet mode = {_on_off(self.modes.quiet)}\n")
        self._write("\n")

    def _build_organisms(self) -> None:
        self._write("Building the initial food web...\n")
        builder = GraphBuilder(self.store)

        while True:
            self._prompt("Enter the name for an organism in the web (or enter DONE): ")
            token = self.reader.word()
            self._prompt("\n")
            if token is None or token == "DONE":
                break
            builder.add_organisms([normalize_name(token, self.config.max_name_length)])
            if self.modes.debug:
                self._write("DEBUG MODE - added an organism:\n")
                self._write(render_web(self.store))
                self._write("\n")
        self._prompt("\n")

    def _build_relations(self) -> None:
        added = GraphBuilder(self.store).add_relations_until_invalid(
            self._relation_pairs(),
            on_rejected=lambda outcome: self._write(f"{outcome.message}\n"),
        )
        logger.info("initial build: %s relations added", added)
        self._write("\n")

    def _relation_pairs(self):
        while True:
            self._prompt(RELATION_PROMPT)
            pair = self._read_pair()
            self._prompt("\n")
            yield pair
            # Resumed once the builder has handled the pair.
            if self.modes.debug:
                self._write("DEBUG MODE - added a relation:\n")
                self._write(render_web(self.store))
                self._write("\n")

    def _modify(self) -> None:
        self._write(DIVIDER + "\n")
        self._write("Modifying the food web...\n\n")

        while True:
            self._prompt(MENU)
            option = self.reader.char()
            self._prompt("\n\n")
            if option is None or option == "q":
                self._write(DIVIDER + "\n")
                break

            if option == "o":
                self._prompt("EXPANSION - enter the name for the new organism: ")
                token = self.reader.word()
                self._prompt("\n")
                if token is None:
                    self._write(DIVIDER + "\n")
                    break
                name = normalize_name(token, self.config.max_name_length)
                self._show(self.mutator.expand(name))
            elif option == "x":
                self._prompt("EXTINCTION - enter the index for the extinct organism: ")
                index = self.reader.integer()
                self._prompt("\n")
                self._show(self.mutator.extinguish(-1 if index is None else index))
            elif option == "r":
                self._prompt(
                    "SUPPLEMENTATION - enter the pair of indices for the new "
                    "predator/prey relation.\n"
                )
                self._prompt("The format is <predator index> <prey index>: ")
                predator, prey = self._read_pair()
                self._prompt("\n")
                self._show(self.mutator.supplement(predator, prey))
            elif option == "p":
                self._write("UPDATED Food Web Predators & Prey:\n")
                self._write(render_web(self.store))
                self._write("\n")
            elif option == "d":
                self._write("Displaying characteristics for the UPDATED food web...\n\n")
                self._write(render_report(self.store, modified=True))
            else:
                logger.info("ignored menu option %r", option)

            self._write(DIVIDER + "\n")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read_pair(self):
        predator = self.reader.integer()
        prey = self.reader.integer()
        return (
            -1 if predator is None else predator,
            -1 if prey is None else prey,
        )

    def _show(self, result: MutationResult) -> None:
        self._write(f"{result.message}\n")
        self._write("\n")
        if result.snapshot is not None:
            self._write(result.snapshot)
            self._write("\n")

    def _prompt(self, text: str) -> None:
        if not self.modes.quiet:
            self._write(text)

    def _write(self, text: str) -> None:
        self.out.write(text)


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"
