"""Timeouts, negated tests and environment restrictions.

Run with:
    casebook run examples/cases_example_timeouts.py --environment Client
"""

import asyncio
import time

import casebook as cb


@cb.display_name("Timeouts and negation")
class TimingCases:
    @cb.test
    @cb.timeout(100)
    async def slow_async_body_times_out(self):
        await asyncio.sleep(0.5)

    @cb.test
    @cb.timeout(100)
    def slow_sync_body_times_out(self):
        time.sleep(0.5)

    @cb.test
    @cb.timeout(1000)
    async def fast_body_passes(self):
        await asyncio.sleep(0.01)

    @cb.test
    @cb.negated
    def division_by_zero_raises(self):
        1 / 0

    @cb.test
    @cb.server
    def server_only(self):
        assert cb.current_test().test_name == "server_only"

    @cb.test
    @cb.client
    def client_only(self):
        assert cb.current_test().test_name == "client_only"


__casebook__ = TimingCases
