"""Demonstration that prints containers of several element types."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from ordercontainer.animal import Animal
from ordercontainer.container import MyContainer


def _line(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def format_container(container: MyContainer, label: str) -> str:
    """Render a container in natural, ascending, descending, sidecross and middle order."""
    sections = [
        ("Normal", iter(container)),
        ("Ascending", container.ascending_order()),
        ("Descending", container.descending_order()),
        ("SideCross", container.sidecross_order()),
        ("MiddleOut", container.middle_order()),
    ]
    text = "".join(
        f"{label} ({name}): \n{_line(values)}\n" for name, values in sections
    )
    return text + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Build sample containers and print them in every order."""
    out = sys.stdout

    int_con: MyContainer[int] = MyContainer()
    for value in (9, 5, 7, 3, 1):
        int_con.add(value)
    int_con.add(ord("h"))
    out.write(f"Integer container: {int_con}\n\n")
    out.write(format_container(int_con, "Int"))

    char_con: MyContainer[str] = MyContainer()
    for value in "dacb":
        char_con.add(value)
    out.write(f"Char container: {char_con}\n\n")
    out.write(format_container(char_con, "Char"))

    str_con: MyContainer[str] = MyContainer()
    for value in ("banana", "apple", "kiwi", "pear"):
        str_con.add(value)
    out.write(f"String container: {str_con}\n\n")
    out.write(format_container(str_con, "String"))

    size_con: MyContainer[int] = MyContainer()
    for value in (50, 10, 30, 20):
        size_con.add(value)
    out.write(f"Size_t container: {size_con}\n\n")
    out.write(format_container(size_con, "Size_t"))

    animal_con: MyContainer[Animal] = MyContainer()
    animal_con.add(Animal(5, "Cat"))
    animal_con.add(Animal(3, "Dog"))
    animal_con.add(Animal(2, "Bird"))
    animal_con.add(Animal(7, "Horse"))
    out.write(format_container(animal_con, "Animal"))
    return 0


if __name__ == "__main__":
    sys.exit(main())