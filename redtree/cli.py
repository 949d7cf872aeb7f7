"""Interactive menu for working with a string-keyed LLRB tree."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from redtree.operations import (
    DEFAULT_SIZES,
    benchmark_operations,
    benchmark_successor,
    generate_tree,
    index_words,
    read_line,
    read_records,
    save_dot,
    save_records,
)
from redtree.tree import EmptyTreeError, InsertOutcome, LLRBTree

MENU = (
    "*******************",
    "1. Вставить новый элемент.",
    "2. Удалить по ключу.",
    "3. Обход дерева в формате КЛП.",
    "4. Форматированный вывод дерева «виде дерева».",
    "5. Красивый вывод в graphviz.",
    "6. Поиск элемента по ключу.",
    "7. Специальный поиск по ключу.",
    "8. Сохранить дерево в текстовый файл.",
    "9. Прочитать дерево из текстового файла.",
    "10. Сгенерировать дерево.",
    "11. Вставить несколько элементов для таймирования вставки, поиска и удаления.",
    "12. Вставить несколько элементов для таймирования специального поиска.",
    "13. Считать из файла для быстрого поиска.",
    "0. Завершение работы.",
)

BAD_INPUT = "Ошибка: введены некорректные данные."
BAD_FILENAME = "Ошибка: введите корректное имя файла."
CHECK_INPUT = "Ошибка: проверьте корректность вводимых данных."
EMPTY_TREE = "Дерево пустое."
NOT_FOUND = "По данному ключу ничего не найдено."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Dialogue:
    """Reads commands from ``stdin`` and reports results to ``stdout``."""

    DOT_FILENAME = "test.dot"

    def __init__(
        self,
        tree: LLRBTree,
        stdin: TextIO,
        stdout: TextIO,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.tree = tree
        self.stdin = stdin
        self.stdout = stdout
        self.rng = random.Random() if rng is None else rng
        self.benchmark_sizes: Sequence[int] = DEFAULT_SIZES
        self._actions: dict[int, Callable[[], None]] = {
            1: self.insert,
            2: self.delete,
            3: self.print_preorder,
            4: self.print_pretty,
            5: self.save_dot,
            6: self.search,
            7: self.successor,
            8: self.save,
            9: self.load,
            10: self.generate,
            11: self.time_operations,
            12: self.time_successor,
            13: self.index_file,
        }

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)

    def _prompt(self, text: str) -> None:
        self._say(text, end="")

    def show_menu(self) -> None:
        """Print the list of commands."""
        for line in MENU:
            self._say(line)

    def read_text(self) -> Optional[str]:
        """Read a line; ``None`` at end of input or for an empty line."""
        return read_line(self.stdin) or None

    def read_positive_int(self) -> Optional[int]:
        """Read a positive integer, asking again until one is given.

        Returns ``None`` at the end of input.
        """
        while True:
            line = self.stdin.readline()
            if not line:
                return None
            if not line.strip():
                continue
            match = _LEADING_INT.match(line)
            if match is not None and int(match.group(1)) > 0:
                return int(match.group(1))
            self._say("Введите целое число!")

    def insert(self) -> None:
        self._prompt("Введите ключ: ")
        key = self.read_text()
        if key is None:
            self._say(BAD_INPUT)
            return
        self._prompt("Введите инфо: ")
        info = self.read_text()
        if info is None:
            self._say(BAD_INPUT)
            return
        outcome, previous = self.tree.insert(key, info)
        if outcome is InsertOutcome.REPLACED:
            self._say("Вершина с введённым ключом уже существует. Информация заменена.")
            self._say(f'Старая информация: "{previous}"')
        elif outcome is InsertOutcome.UNCHANGED:
            self._say("Вершина с введённым ключом и информацией уже существует.")
        else:
            self._say("Запись успешно добавлена.")

    def delete(self) -> None:
        self._prompt("Введите ключ: ")
        key = self.read_text()
        if key is None:
            self._say(BAD_INPUT)
            return
        try:
            self.tree.delete(key)
        except EmptyTreeError:
            self._say(EMPTY_TREE)
        except KeyError:
            self._say(NOT_FOUND)
        else:
            self._say("Запись успешно удалена.")

    def print_preorder(self) -> None:
        if self.tree.is_empty():
            self._say(EMPTY_TREE)
            return
        for key, info in self.tree.preorder():
            self._say(f'Key: "{key}" Info: "{info}" ')

    def print_pretty(self) -> None:
        if self.tree.is_empty():
            self._say(EMPTY_TREE)
            return
        for line in self.tree.pretty_lines():
            self._say(line)

    def save_dot(self) -> None:
        try:
            save_dot(self.tree, self.DOT_FILENAME)
        except EmptyTreeError:
            self._say(EMPTY_TREE)
        except OSError:
            self._say(CHECK_INPUT)
        else:
            self._say("Дерево успешно записано.")

    def search(self) -> None:
        self._prompt("Введите ключ: ")
        key = self.read_text()
        if key is None:
            self._say(BAD_INPUT)
            return
        try:
            info = self.tree.search(key)
        except EmptyTreeError:
            self._say(EMPTY_TREE)
        except KeyError:
            self._say(NOT_FOUND)
        else:
            self._say(f'Запись найдена. key: "{key}", info: "{info}"')

    def successor(self) -> None:
        self._prompt("Введите ключ: ")
        key = self.read_text()
        if key is None:
            self._say(BAD_INPUT)
            return
        try:
            found = self.tree.successor(key)
        except KeyError:
            self._say(NOT_FOUND)
        else:
            self._say(f'Найденный ключ: "{found}".')

    def _read_filename(self) -> Optional[str]:
        self._prompt("Введите имя файла (c форматом): ")
        filename = self.read_text()
        if filename is None:
            self._say(BAD_FILENAME)
        return filename

    def save(self) -> None:
        filename = self._read_filename()
        if filename is None:
            return
        try:
            save_records(self.tree, filename)
        except EmptyTreeError:
            self._say(EMPTY_TREE)
        except OSError:
            self._say(CHECK_INPUT)
        else:
            self._say("Дерево успешно сохранено в текстовый файл.")

    def load(self) -> None:
        filename = self._read_filename()
        if filename is None:
            return
        try:
            count = read_records(self.tree, filename)
        except (OSError, UnicodeDecodeError):
            self._say("Проверьте корректность данных.")
        else:
            self._say(f"Записей считано из файла: {count}.")

    def generate(self) -> None:
        self._prompt("Введите количество вершин в дереве: ")
        count = self.read_positive_int()
        if count is None:
            return
        generate_tree(self.tree, count, self.rng)
        self._say(f"Успешно создано {count} записей.")

    def _read_count_and_repeats(self, what: str) -> Optional[tuple[int, int]]:
        self._prompt(what)
        count = self.read_positive_int()
        if count is None:
            return None
        self._prompt("Введите количество повторений для всех операций: ")
        repeats = self.read_positive_int()
        if repeats is None:
            return None
        return count, repeats

    def time_operations(self) -> None:
        params = self._read_count_and_repeats(
            "Введите количество элементов для вставки/удаления/поиска: "
        )
        if params is None:
            return
        count, repeats = params
        for times in benchmark_operations(
            self.tree, count, repeats, self.rng, self.benchmark_sizes
        ):
            self._say(f"Количество элементов в дереве: {times.size}")
            self._say(f"Время вставки: {times.insert:.6f}")
            self._say(f"Время поиска: {times.search:.6f}")
            self._say(f"Время удаления: {times.delete:.6f}")

    def time_successor(self) -> None:
        params = self._read_count_and_repeats(
            "Введите количество элементов для специального поиска: "
        )
        if params is None:
            return
        count, repeats = params
        for timing in benchmark_successor(
            self.tree, count, repeats, self.rng, self.benchmark_sizes
        ):
            self._say(f"Количество элементов в дереве: {timing.size}")
            self._say(f"Время специального поиска: {timing.seconds:.6f}")

    def index_file(self) -> None:
        filename = self._read_filename()
        if filename is None:
            return
        try:
            index_words(self.tree, filename)
        except (OSError, UnicodeDecodeError):
            self._say(CHECK_INPUT)
        else:
            self._say("Файл успешно считан.")

    def run(self) -> int:
        """Serve commands until ``0`` (returns 0) or end of input (returns 1)."""
        while True:
            self.show_menu()
            line = self.stdin.readline()
            if not line:
                return 1
            match = _LEADING_INT.match(line)
            option = int(match.group(1)) if match is not None else -1
            if option == 0:
                return 0
            action = self._actions.get(option)
            if action is not None:
                action()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="redtree", description="Interactive LLRB tree of strings."
    )
    parser.parse_args(argv)
    dialogue = Dialogue(LLRBTree(), sys.stdin, sys.stdout, random.Random())
    return dialogue.run()


if __name__ == "__main__":
    sys.exit(main())