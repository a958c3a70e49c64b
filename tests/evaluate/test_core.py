import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import seatalloc.evaluate.core
import seatalloc.evaluate.proportional


def test_invalid_input_hierarchy():
    assert issubclass(
        seatalloc.evaluate.core.InvalidInput,
        seatalloc.evaluate.core.VotingSystemError
    )
    assert issubclass(seatalloc.evaluate.core.InvalidInput, ValueError)


def test_allocator_abstract():
    with pytest.raises(TypeError):
        seatalloc.evaluate.core.SeatAllocator()
    assert isinstance(
        seatalloc.evaluate.proportional.HighestAverages(),
        seatalloc.evaluate.core.SeatAllocator
    )
