"""Basic example walking through every section of syntaxtour.

This example shows the construction output, each demonstration section,
and what happens when an absent value is forced.
"""

from syntaxtour import ABSENT, BasicExample, NullReferenceError, SECTIONS, unwrap


def main() -> None:
    """Run the basic example."""
    print("=" * 60)
    print("syntaxtour - Basic Example")
    print("=" * 60)

    # Example 1: Construction runs field initialisers and init steps
    print("\n1. Constructing BasicExample:")
    example = BasicExample("kotlin")
    print(f"   Created: {example}")

    # Example 2: Each section on its own
    for i, section in enumerate(SECTIONS, 2):
        print(f"\n{i}. Section {section}:")
        example.run_section(section)

    # Example 3: Forcing an absent value is fatal
    print(f"\n{len(SECTIONS) + 2}. Forcing an absent value:")
    try:
        unwrap(ABSENT)
    except NullReferenceError as e:
        print(f"   Raised: {e}")

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
