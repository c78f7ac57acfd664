"""Lifecycle hooks, ordering and tag filtering.

Run with:
    casebook run examples -t inventory -v
"""

import casebook as cb


@cb.display_name("Inventory")
@cb.tag("inventory")
class InventoryCases:
    def set_up(self):
        # Called once, right after the class is instantiated.
        self.stock = {}
        self.log = []

    @cb.before_all
    def open_store(self):
        self.log.append("open")

    @cb.before_each
    def restock(self):
        self.stock = {"apple": 3, "pear": 1}

    @cb.after_each
    def audit(self):
        self.log.append(f"audit:{sum(self.stock.values())}")

    @cb.after_all
    def close_store(self):
        self.log.append("close")

    @cb.test
    @cb.order(1)
    def starts_with_apples(self):
        assert self.stock["apple"] == 3

    @cb.test
    @cb.order(2)
    @cb.display_name("selling removes stock")
    def sell(self):
        self.stock["pear"] -= 1
        assert self.stock["pear"] == 0

    @cb.test
    @cb.tag("slow")
    async def reorder(self):
        self.stock["apple"] += 10
        assert self.stock["apple"] == 13

    @cb.test
    @cb.disabled("supplier API not available")
    def supplier_sync(self):
        raise RuntimeError("never runs")


class UntaggedCases:
    @cb.test
    def only_runs_without_filters(self):
        assert True
