import unittest
from client.actors.token import Token
from core.grid.models import GridConfig
from core.report import (
    build_reports, format_number, format_report, measure_pairs, rank_pairs, report_to_dict,
)


class TestReport(unittest.TestCase):
    def setUp(self):
        self.grid = GridConfig(cell_size=100, unit_distance=5, unit_label="ft")
        self.fighter = Token(name="Fighter", x=0, y=0)
        self.goblin = Token(name="Goblin", x=300, y=400)       # 25 ft
        self.wyvern = Token(name="Wyvern", x=100, y=0, elevation=30)  # ~30.4 ft
        self.rat = Token(name="Rat", x=100, y=0)               # 5 ft

    def test_measure_pairs_keeps_target_order(self):
        pairs = measure_pairs(self.fighter, [self.goblin, self.rat], self.grid)
        self.assertEqual([p.target.name for p in pairs], ["Goblin", "Rat"])
        self.assertIs(pairs[0].source, self.fighter)
        self.assertEqual(pairs[0].result.phb, 20)
        self.assertEqual(pairs[0].result.dmg, 25)

    def test_rank_pairs_sorts_by_euclid(self):
        # The old macro's comparator never returned, so results came out unsorted.
        pairs = measure_pairs(self.fighter, [self.wyvern, self.goblin, self.rat], self.grid)
        ranked = rank_pairs(pairs)
        self.assertEqual([p.target.name for p in ranked], ["Rat", "Goblin", "Wyvern"])
        self.assertNotEqual([p.target.name for p in pairs], [p.target.name for p in ranked])

    def test_rank_pairs_is_stable(self):
        twin = Token(name="Rat 2", x=0, y=100)
        pairs = measure_pairs(self.fighter, [twin, self.rat], self.grid)
        self.assertEqual([p.target.name for p in rank_pairs(pairs)], ["Rat 2", "Rat"])

    def test_build_reports_per_source(self):
        cleric = Token(name="Cleric", x=300, y=300)
        reports = build_reports([self.fighter, cleric], [self.goblin, self.rat], self.grid)
        self.assertEqual([source.name for source, _ in reports], ["Fighter", "Cleric"])
        self.assertEqual([p.target.name for p in reports[1][1]], ["Goblin", "Rat"])

    def test_build_reports_empty_inputs(self):
        self.assertEqual(build_reports([], [self.goblin], self.grid), [])
        self.assertEqual(build_reports([self.fighter], [], self.grid), [])

    def test_format_report(self):
        pairs = rank_pairs(measure_pairs(self.fighter, [self.wyvern, self.goblin], self.grid))
        html = format_report(pairs, self.grid)
        self.assertEqual(
            html,
            "<p>Distances in PHB / Euclidian / DMG ft.</p>"
            "<p>Fighter is 20 / 25 / 25 from Goblin</p>"
            "<p>Fighter is 30 / 30 / 30 from Wyvern</p>",
        )

    def test_format_report_no_pairs_is_header_only(self):
        self.assertEqual(format_report([], GridConfig(unit_label="m")), "<p>Distances in PHB / Euclidian / DMG m.</p>")

    def test_format_number(self):
        self.assertEqual(format_number(25), "25")
        self.assertEqual(format_number(25.0), "25")
        self.assertEqual(format_number(4.5), "4.5")

    def test_report_to_dict(self):
        pairs = measure_pairs(self.fighter, [self.goblin], self.grid)
        data = report_to_dict(self.fighter, pairs)
        self.assertEqual(data["source"], "Fighter")
        self.assertEqual(data["distances"][0]["target"], "Goblin")
        self.assertEqual(data["distances"][0]["phb"], 20)
        self.assertAlmostEqual(data["distances"][0]["euclid"], 25.0)


if __name__ == '__main__':
    unittest.main()
