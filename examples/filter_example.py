"""Example: growing a filter chain and applying it to a DataFrame.

This example demonstrates:
- Building a chain one condition at a time
- How same-operator calls stay flat and operator switches split the node
- Saving and reloading the chain
- Evaluating the chain as a row mask
"""

import pandas as pd

from exprchain import of, or_chains
from exprchain.chain.compiler import evaluate_tree
from exprchain.chain.schema import from_json, to_json


def main():
    """Run the filter chain example."""
    print("=" * 60)
    print("exprchain filter example")
    print("=" * 60)

    # =========================================================================
    # Step 1: Grow a chain
    # =========================================================================
    chain = of("in_stock").and_("on_sale").and_("shippable")
    print(f"\n[Step 1] AND run stays flat:   {chain}")

    chain.or_(or_chains(of("clearance"), of("staff_pick")))
    print(f"[Step 2] OR switch splits:     {chain}")

    # Optional conditions are skipped when absent
    extra = None
    chain.and_optional(extra)
    print(f"[Step 3] absent optional:      {chain}")

    # =========================================================================
    # Step 2: Save and reload
    # =========================================================================
    document = to_json(chain, indent=2)
    restored = from_json(document)
    print(f"\n[Step 4] reloaded:             {restored}")

    # =========================================================================
    # Step 3: Evaluate over a frame
    # =========================================================================
    products = pd.DataFrame(
        {
            "name": ["lamp", "chair", "desk", "rug"],
            "in_stock": [True, True, False, True],
            "on_sale": [True, False, True, True],
            "shippable": [True, True, True, False],
            "clearance": [False, False, True, False],
            "staff_pick": [False, True, False, False],
        }
    )
    mask = evaluate_tree(restored, products)
    print(f"\n[Step 5] matching products: {products.loc[mask, 'name'].tolist()}")


if __name__ == "__main__":
    main()
