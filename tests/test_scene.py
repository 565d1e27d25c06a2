import unittest
from client.actors.token import ASSISTANT, GAMEMASTER, PLAYER, Token, User
from client.scene import NO_SOURCES, NO_TARGETS, Scene
from client.ui.manager import UIManager
from core.grid.models import GridConfig


class TestSceneSelection(unittest.TestCase):
    def setUp(self):
        self.player = User(id="p1", name="Alice", role=PLAYER)
        self.gm = User(id="gm", name="Dungeon Master", role=GAMEMASTER)
        self.paladin = Token(name="Paladin", x=0, y=0, owner_ids=frozenset({"p1"}))
        self.orc = Token(name="Orc", x=500, y=0)
        self.scene = Scene(tokens=[self.paladin, self.orc])
        self.ui = UIManager()

    def test_default_grid(self):
        self.assertEqual(self.scene.grid, GridConfig(cell_size=100, unit_distance=5, unit_label="ft"))

    def test_controlled_tokens_win(self):
        self.scene.controlled = [self.orc]
        self.assertEqual(self.scene.get_source_tokens(self.player, self.ui), [self.orc])
        self.assertEqual(self.ui.warnings(), [])

    def test_player_falls_back_to_owned_tokens(self):
        self.assertEqual(self.scene.get_source_tokens(self.player, self.ui), [self.paladin])
        self.assertEqual(self.ui.warnings(), [])

    def test_gm_without_selection_warns(self):
        with self.assertLogs("tabletop.ui", level="WARNING"):
            self.assertEqual(self.scene.get_source_tokens(self.gm, self.ui), [])
        self.assertEqual(self.ui.warnings(), ["Pythagoras | " + NO_SOURCES])

    def test_assistant_gets_no_fallback(self):
        assistant = User(id="p1", name="Helper", role=ASSISTANT)
        self.assertEqual(self.scene.get_source_tokens(assistant, self.ui), [])
        self.assertEqual(len(self.ui.warnings()), 1)

    def test_no_targets_warns(self):
        self.assertEqual(self.scene.get_targets(self.ui), [])
        self.assertEqual(self.ui.warnings(), ["Pythagoras | " + NO_TARGETS])

    def test_targets(self):
        self.scene.targets = [self.orc]
        self.assertEqual(self.scene.get_targets(self.ui), [self.orc])
        self.assertEqual(self.ui.warnings(), [])

    def test_from_dict_rejects_infinite_coordinates(self):
        with self.assertRaises(ValueError):
            Token.from_dict({"name": "Ghost", "x": "inf", "y": 0})

    def test_token_position_is_a_snapshot(self):
        position = self.orc.position
        self.orc.x = 900
        self.assertEqual(position.x, 500)


if __name__ == '__main__':
    unittest.main()
