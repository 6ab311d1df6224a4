import asyncio
import unittest
from junction.kernel.scheduler import AsyncioScheduler, VirtualScheduler

class TestVirtualScheduler(unittest.TestCase):
    def test_nothing_runs_until_advanced(self):
        scheduler = VirtualScheduler()
        calls = []
        scheduler.call_soon(lambda: calls.append("soon"))
        self.assertEqual(calls, [])
        scheduler.advance(0)
        self.assertEqual(calls, ["soon"])

    def test_fires_in_due_order(self):
        scheduler = VirtualScheduler()
        calls = []
        scheduler.call_later(300, lambda: calls.append(("c", scheduler.now_ms())))
        scheduler.call_later(100, lambda: calls.append(("a", scheduler.now_ms())))
        scheduler.call_later(100, lambda: calls.append(("b", scheduler.now_ms())))
        self.assertEqual(scheduler.advance(250), 2)
        self.assertEqual(calls, [("a", 100), ("b", 100)])
        self.assertEqual(scheduler.now_ms(), 250)
        scheduler.advance(50)
        self.assertEqual(calls[-1], ("c", 300))

    def test_timer_armed_inside_callback_fires_in_window(self):
        scheduler = VirtualScheduler()
        calls = []

        def first():
            calls.append(scheduler.now_ms())
            scheduler.call_later(100, lambda: calls.append(scheduler.now_ms()))

        scheduler.call_later(100, first)
        scheduler.advance(200)
        self.assertEqual(calls, [100, 200])

    def test_cancel(self):
        scheduler = VirtualScheduler()
        calls = []
        handle = scheduler.call_later(10, lambda: calls.append(1))
        self.assertEqual(scheduler.pending, 1)
        handle.cancel()
        self.assertEqual(scheduler.pending, 0)
        scheduler.advance(100)
        self.assertEqual(calls, [])

    def test_fractional_advances_accumulate(self):
        scheduler = VirtualScheduler()
        calls = []
        scheduler.call_later(1, lambda: calls.append(scheduler.now_ms()))
        for _ in range(3):
            scheduler.advance(0.5)
        self.assertEqual(calls, [1.0])
        self.assertEqual(scheduler.now_ms(), 1.5)

    def test_fractional_delay_is_not_shortened(self):
        scheduler = VirtualScheduler()
        calls = []
        scheduler.call_later(1000.9, lambda: calls.append(scheduler.now_ms()))
        scheduler.advance(1000)
        self.assertEqual(calls, [])
        scheduler.advance(1)
        self.assertEqual(calls, [1000.9])

    def test_positive_delay_lands_after_now(self):
        scheduler = VirtualScheduler(start_ms=1e20)
        handle = scheduler.call_later(0.5, lambda: None)
        self.assertGreater(handle.due_ms, scheduler.now_ms())

    def test_rejects_moving_backwards(self):
        scheduler = VirtualScheduler()
        scheduler.advance(100)
        with self.assertRaises(ValueError):
            scheduler.advance(-50)
        self.assertEqual(scheduler.now_ms(), 100)

class TestAsyncioScheduler(unittest.IsolatedAsyncioTestCase):
    async def test_binds_running_loop(self):
        scheduler = AsyncioScheduler()
        fired = asyncio.Event()
        scheduler.call_later(10, fired.set)
        await asyncio.wait_for(fired.wait(), timeout=1.0)
        self.assertIs(scheduler.loop, asyncio.get_running_loop())
        self.assertIsInstance(scheduler.now_ms(), float)

if __name__ == '__main__':
    unittest.main()
