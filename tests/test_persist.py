import sys
import os
import json

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import seatalloc.persist
import seatalloc.evaluate.proportional
from seatalloc.component.divisor import Method


@pytest.mark.parametrize('method', list(Method))
def test_roundtrip(method):
    evaluator = seatalloc.evaluate.proportional.HighestAverages(method)
    dict_form = seatalloc.persist.to_dict(evaluator)
    serial = json.dumps(dict_form)
    restored = seatalloc.persist.from_dict(json.loads(serial))
    assert isinstance(restored, seatalloc.evaluate.proportional.HighestAverages)
    assert restored.method is method


def test_dict_form():
    evaluator = seatalloc.evaluate.proportional.HighestAverages('danish')
    assert seatalloc.persist.to_dict(evaluator) == {
        'class': 'seatalloc.evaluate.proportional.HighestAverages',
        'method': 'danish',
    }


def test_restored_allocates():
    restored = seatalloc.persist.from_dict({
        'class': 'seatalloc.evaluate.proportional.HighestAverages',
        'method': 'imperiali',
    })
    assert restored.allocate_seats(13, [480, 310, 940, 270]) == [3, 1, 8, 1]


@pytest.mark.parametrize('bad_def', [
    [],
    'seatalloc.evaluate.proportional.HighestAverages',
    {'method': 'd_hondt'},
    {'class': '.HighestAverages'},
    {'class': 'no such class'},
    {'class': 'seatalloc.evaluate.proportional.HighestAverages',
     'method': 'hare'},
    {'class': 'seatalloc.evaluate.proportional.HighestAverages',
     'seats': 10},
    {'class': 'seatalloc.nosuchmod.Thing'},
    {'class': 'seatalloc.evaluate.proportional.NoSuchAllocator'},
    {'class': 'seatalloc.evaluate.core.SeatAllocator'},
])
def test_from_dict_invalid(bad_def):
    with pytest.raises(ValueError):
        seatalloc.persist.from_dict(bad_def)


@pytest.mark.parametrize('class_name', [
    'subprocess.getoutput',
    'nosuchmod.Thing',
    'seatalloc.evaluate.proportional.allocate_seats',
    'seatalloc.evaluate.proportional.CandidateEntry',
])
def test_from_dict_rejects_non_allocators(class_name):
    with pytest.raises(ValueError):
        seatalloc.persist.from_dict({'class': class_name, 'cmd': 'echo hi'})


def test_serialize_invalid():
    with pytest.raises(ValueError):
        seatalloc.persist.to_dict(object())
