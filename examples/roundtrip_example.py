"""Example: parse, evaluate, print and round-trip an arithmetic expression.

Walks one expression through every view of the tree:
- Evaluation
- Inline and indented pretty-printing
- Serialization to the token format and loading it back
"""

import io

from arithtree.expression import ExpressionTree, TokenStream, load


def main():
    """Run the round-trip example."""
    print("=" * 60)
    print("arithtree round trip")
    print("=" * 60)

    # =========================================================================
    # Step 1: Parse
    # =========================================================================
    tree = ExpressionTree.from_string("1+2*3-4")
    print(f"\n[Step 1] Parsed: {tree!r}")

    # =========================================================================
    # Step 2: Views
    # =========================================================================
    print(f"\n[Step 2] Value:  {tree.evaluate()}")
    print(f"         Inline: {tree.formula}")
    print("         Tree:")
    tree.pretty_print_tree()

    # =========================================================================
    # Step 3: Serialize and reload
    # =========================================================================
    serialized = tree.serialize()
    print(f"\n[Step 3] Serialized: {serialized}")
    reloaded = load(io.StringIO(serialized))
    print(f"         Reloaded:   {reloaded.pretty_print_inline()}")

    # Several trees can share one stream
    stream = TokenStream("Op + Constant 3 Constant 4 Op / Constant 1 Constant 0")
    while not stream.exhausted:
        node = load(stream)
        print(f"         {node.pretty_print_inline()} = {node.evaluate()}")


if __name__ == "__main__":
    main()
