"""A small class that walks through basic language features.

Construction runs field initialisers (one of them with a side effect) and
then an ordered list of init steps. ``examples()`` prints the control flow,
optional-value and inner-class demonstrations.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable

from syntaxtour.optional import (
    ABSENT,
    Option,
    filter_present,
    is_present,
    optional,
    safe_length,
    unwrap,
)

WELCOME_MSG = "Welcome to Kotlin!"

# Run order for examples(); values are shown by `syntaxtour --list`.
SECTIONS: dict[str, str] = {
    "control-flow": "if/else as expression, branch match, for and while loops",
    "nullable": "safe access, fallback values, forced unwrap, filtering absent",
    "create-class": "inner helper holding a reference to its outer object",
}


def _also(value, side_effect: Callable[[object], None]):
    """Run side_effect on value and hand value back unchanged."""
    side_effect(value)
    return value


class BasicExample:
    """Demonstration object built from a single name.

    Attributes:
        name: The name given at construction
        upper_reversed_name: name upper-cased, then reversed
        welcome_msg: Fixed greeting printed by the first init step
        name_length: Number of characters in name
    """

    def __init__(self, name: str) -> None:
        self._name = name

        # Field initialisers, in declaration order.
        self._upper_reversed_name = name.upper()[::-1]
        self._welcome_msg = _also(
            WELCOME_MSG,
            lambda _: print("This is the side effect of creating welcomeMsg"),
        )
        self._name_length = self._length(name)

        for step in self._init_steps():
            step()

    def _init_steps(self) -> list[Callable[[], None]]:
        return [self._first_init, self._second_init]

    def _first_init(self) -> None:
        print("this is first constructor")
        self._welcome()

    def _second_init(self) -> None:
        print("this is the second constructor")

    @property
    def name(self) -> str:
        return self._name

    @property
    def upper_reversed_name(self) -> str:
        return self._upper_reversed_name

    @property
    def welcome_msg(self) -> str:
        return self._welcome_msg

    @property
    def name_length(self) -> int:
        return self._name_length

    def examples(self) -> None:
        """Run every demonstration in order."""
        for section in SECTIONS:
            self.run_section(section)

    def run_section(self, section: str) -> None:
        """Run a single demonstration by its SECTIONS key.

        Raises:
            ValueError: If section is not a known key
        """
        runners = {
            "control-flow": self._control_flow,
            "nullable": self._nullable,
            "create-class": self._create_class,
        }
        if section not in runners:
            raise ValueError(
                f"Unknown section {section!r}, expected one of {', '.join(SECTIONS)}"
            )
        runners[section]()

    @staticmethod
    def _length(text: str) -> int:
        return len(text)

    def _welcome(self) -> None:
        print(self._welcome_msg)
        print(
            f"My name is {self._name}, it has {self._name_length} characters.\n"
            f"Do you still recognize my name {self._upper_reversed_name}?"
        )

    def _control_flow(self) -> None:
        name = self._name
        if self._name_length > 10:
            print(f"{name} is pretty long")

        print(
            f"{name} starts with upper case"
            if name[:1].isupper()
            else f"{name} starts with lower case"
        )

        match_input = 1
        if match_input in (1, 2, 3):
            print("input is in 1,2,3")
        else:
            print("who knows")

        for i in [1, 2, 3]:
            print(i)

        for k, v in {"a": 1, "b": 2, "c": 3}.items():
            print(f"{k} is {v}")

        while_stop = 10
        while_input = 0
        while while_input < while_stop:
            while_input += 1
            print(while_input)

    def _nullable(self) -> None:
        def get_nullable_name() -> Option:
            return optional(self._name)

        def print_len_if_present(a: Option) -> None:
            print(
                f"{a.value} has length of {len(a.value)}"
                if is_present(a)
                else "input is null "
            )

        a: Option = ABSENT
        print(safe_length(a))
        print_len_if_present(a)

        a = get_nullable_name()
        print(len(unwrap(a)))
        print_len_if_present(a)

        one_to_five = [1, 2, 3, 4, ABSENT, 5]
        print(f"sum is {reduce(lambda acc, i: acc + i, filter_present(one_to_five))}")

    def _create_class(self) -> None:
        inner = Inner(f"inner[{self._name}]", outer=self)
        inner.hello()
        inner.print_outer_name()

    def __repr__(self) -> str:
        return f"BasicExample(name={self._name!r})"


class Inner:
    """Helper that reads its enclosing BasicExample's name."""

    def __init__(self, inner_name: str, outer: BasicExample) -> None:
        self.inner_name = inner_name
        self.outer = outer

    def hello(self) -> None:
        print(f"hello from the inner class! innerName is {self.inner_name}")

    def print_outer_name(self) -> None:
        print(f"name member of the outer class is {self.outer.name}")
