import os
import tempfile
import unittest

import yaml

from text_adventure.campaign import (
    CampaignError, build_rooms, campaign_path, list_campaigns, load_campaign, new_game, parse_campaign,
)
from text_adventure.commands import Look, Move, Take
from text_adventure.director import update
from text_adventure.world import Direction, Exit, Item

WORLDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "worlds")


class TestShippedWorlds(unittest.TestCase):
    def test_lists_worlds(self):
        campaigns = list_campaigns(WORLDS_DIR)
        self.assertIn("kaer_morhen", campaigns)
        self.assertIn("gate_and_yard", campaigns)

    def test_kaer_morhen(self):
        campaign = load_campaign(campaign_path(WORLDS_DIR, "kaer_morhen"))
        self.assertEqual(campaign.title, "Kaer Morhen")
        self.assertEqual(campaign.state.current_room, "Gate")
        self.assertEqual(campaign.state.inventory, ())

        # Every exit leads to a defined room.
        names = {room.name for room in campaign.state.rooms}
        for room in campaign.state.rooms:
            for exit_ in room.exits:
                self.assertIn(exit_.destination, names)

    def test_gate_and_yard_walkthrough(self):
        state = load_campaign(campaign_path(WORLDS_DIR, "gate_and_yard")).state
        state, message = update(state, Look())
        self.assertEqual(message.text, "Gate\nAn old gate.\n\nYou see here:\n- medallion")
        state, _ = update(state, Take(Item("medallion")))
        state, _ = update(state, Move(Direction.NORTH))
        self.assertEqual(state.current_room, "Yard")


class TestBuildRooms(unittest.TestCase):
    def test_order_and_shape(self):
        rooms = build_rooms({'rooms': [
            {'name': 'A', 'description': 'first\n', 'exits': {'north': 'B', 'd': 'C'}, 'items': ['cup']},
            {'name': 'B'},
        ]})
        self.assertEqual([r.name for r in rooms], ['A', 'B'])
        self.assertEqual(rooms[0].description, 'first')
        self.assertEqual(rooms[0].exits, (Exit(Direction.NORTH, 'B'), Exit(Direction.DOWN, 'C')))
        self.assertEqual(rooms[0].items, (Item('cup'),))
        self.assertEqual(rooms[1].exits, ())
        self.assertEqual(rooms[1].items, ())

    def test_rejects_bad_worlds(self):
        bad = [
            {},
            {'rooms': []},
            {'rooms': [{'description': 'no name'}]},
            {'rooms': [{'name': 'A', 'exits': {'sideways': 'B'}}]},
            {'rooms': [{'name': 'A', 'exits': {'north': None}}]},
            {'rooms': [{'name': 'A', 'items': [{'nested': True}]}]},
            {'rooms': [{'name': 'A', 'items': 'medallion'}]},
            {'rooms': [{'name': 'A', 'exits': ['north']}]},
            {'rooms': [{'name': 'A', 'description': 42}]},
        ]
        for data in bad:
            with self.assertRaises(CampaignError, msg=data):
                build_rooms(data)

    def test_parse_campaign(self):
        campaign = parse_campaign({'rooms': [{'name': 'A'}, {'name': 'B'}]})
        self.assertEqual(campaign.title, 'Untitled')
        self.assertEqual(campaign.state.current_room, 'A')

        with self.assertRaises(CampaignError):
            parse_campaign(['not', 'a', 'mapping'])

    def test_undefined_start_is_allowed(self):
        campaign = parse_campaign({'start': 'Void', 'rooms': [{'name': 'A'}]})
        _, message = update(campaign.state, Look())
        self.assertEqual(message.text, "You are nowhere.")

    def test_new_game(self):
        rooms = build_rooms({'rooms': [{'name': 'A'}]})
        state = new_game('A', list(rooms))
        self.assertEqual(state.rooms, rooms)
        self.assertEqual(state.inventory, ())


class TestLoadErrors(unittest.TestCase):
    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_campaign(os.path.join(WORLDS_DIR, "missing.yaml"))

    def test_malformed_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "broken.yaml")
            with open(path, "w") as f:
                f.write("rooms: [\n  - name: A\n")
            with self.assertRaises(yaml.YAMLError):
                load_campaign(path)

    def test_list_missing_directory(self):
        self.assertEqual(list_campaigns(os.path.join(WORLDS_DIR, "nope")), [])


if __name__ == '__main__':
    unittest.main()
