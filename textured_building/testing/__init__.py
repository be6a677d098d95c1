"""
Textured Building - Testing Module
==================================

Tools for exercising the mod without the game.

Components:
- MockPlayer: player with hotbar, backpack and character inventories
- RecordingSwapChannel: records outgoing messages
- LoopbackSwapChannel: delivers messages to an in-process swap server
- PlacementTestCase: unittest base class with filter/placement assertions

Usage:
    from textured_building.testing import PlacementTestCase

    class TestClay(PlacementTestCase):
        config_values = {"allow_clay": False}

        def test_bowls_excluded(self):
            self.assertDenied("game:bowl-fired")
"""

from .mocks import (
    MockPlayer,
    RecordingSwapChannel,
    LoopbackSwapChannel,
    swap_counts,
)

from .cases import PlacementTestCase

__all__ = [
    # Mocks
    'MockPlayer',
    'RecordingSwapChannel',
    'LoopbackSwapChannel',
    'swap_counts',

    # Testing
    'PlacementTestCase',
]
