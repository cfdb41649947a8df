from __future__ import annotations

import unittest

import numpy as np

from luvatrix_notation.schedule import AnimationPlan, schedule_animation, total_duration


class AnimationSchedulerTests(unittest.TestCase):
    def test_duration_is_split_by_length_share(self) -> None:
        plans = schedule_animation([10.0, 30.0, 60.0], 1000.0, 200.0)
        self.assertEqual(len(plans), 3)
        for plan, duration, delay in zip(plans, (100.0, 300.0, 600.0), (200.0, 300.0, 600.0)):
            self.assertAlmostEqual(plan.duration, duration)
            self.assertAlmostEqual(plan.delay, delay)

    def test_durations_sum_to_budget(self) -> None:
        rng = np.random.default_rng(1234)
        for _ in range(20):
            lengths = rng.uniform(0.5, 400.0, size=int(rng.integers(1, 12))).tolist()
            plans = schedule_animation(lengths, 800.0, 0.0)
            self.assertAlmostEqual(total_duration(plans), 800.0, places=6)

    def test_each_path_starts_when_previous_ends(self) -> None:
        plans = schedule_animation([3.0, 1.0, 4.0, 1.0, 5.0], 900.0, 50.0)
        self.assertEqual(plans[0].delay, 50.0)
        for prev, cur in zip(plans, plans[1:]):
            self.assertAlmostEqual(cur.delay, prev.delay + prev.duration)

    def test_zero_total_length_yields_zero_durations(self) -> None:
        plans = schedule_animation([0.0, 0.0], 800.0, 120.0)
        self.assertEqual(plans, [AnimationPlan(duration=0.0, delay=120.0), AnimationPlan(duration=0.0, delay=120.0)])

    def test_zero_budget_keeps_every_path_instant(self) -> None:
        plans = schedule_animation([5.0, 5.0], 0.0, 10.0)
        self.assertEqual([p.duration for p in plans], [0.0, 0.0])
        self.assertEqual([p.delay for p in plans], [10.0, 10.0])

    def test_empty_input_returns_empty_plan(self) -> None:
        self.assertEqual(schedule_animation([], 800.0, 0.0), [])
        self.assertEqual(total_duration([]), 0.0)


if __name__ == "__main__":
    unittest.main()
