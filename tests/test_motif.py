"""
Tests for MotifToken and property kinds.
"""

import dataclasses

import numpy as np
import pytest

from motifvec.core.motif import MotifToken, PropertyKind, property_kind


class TestPropertyKind:

    def test_numbers(self):
        assert property_kind(3) is PropertyKind.NUMBER
        assert property_kind(0.5) is PropertyKind.NUMBER
        assert property_kind(np.float32(0.5)) is PropertyKind.NUMBER
        assert property_kind(np.int64(2)) is PropertyKind.NUMBER

    def test_boolean_is_not_number(self):
        """bool subclasses int but is its own kind."""
        assert property_kind(True) is PropertyKind.BOOLEAN
        assert property_kind(np.bool_(False)) is not PropertyKind.NUMBER

    def test_text_and_other(self):
        assert property_kind("slow") is PropertyKind.TEXT
        assert property_kind([1, 2]) is PropertyKind.OTHER
        assert property_kind(None) is PropertyKind.OTHER
        assert property_kind(1 + 2j) is PropertyKind.OTHER


class TestMotifToken:

    def test_fields(self):
        motif = MotifToken('test_motif', {'param1': 0.5}, 0.8, ('temporal', 'spatial'))
        assert motif.name == 'test_motif'
        assert motif.properties['param1'] == 0.5
        assert motif.weight == 0.8
        assert motif.has_tag('temporal')
        assert not motif.has_tag('memory')

    def test_immutable(self):
        motif = MotifToken('m', {'a': 1.0}, 0.5, ['memory'])
        with pytest.raises(dataclasses.FrozenInstanceError):
            motif.weight = 0.9
        with pytest.raises(TypeError):
            motif.properties['a'] = 2.0

    def test_caller_dict_not_shared(self):
        """Mutating the source dict after construction does not leak in."""
        props = {'a': 1.0}
        motif = MotifToken('m', props, 0.5)
        props['a'] = 99.0
        assert motif.properties['a'] == 1.0

    def test_context_ordered_set(self):
        motif = MotifToken('m', {}, 1.0, ['memory', 'temporal', 'memory'])
        assert motif.context == ('memory', 'temporal')

    def test_bare_string_context_is_one_tag(self):
        motif = MotifToken('m', {}, 0.5, 'temporal')
        assert motif.context == ('temporal',)
        assert motif.has_tag('temporal')

    def test_numeric_properties_filters_kinds(self):
        motif = MotifToken('m', {'x': 2, 'label': 'a', 'flag': True, 'y': 0.5, 'z': None}, 1.0)
        assert list(motif.numeric_properties()) == [('x', 2.0), ('y', 0.5)]

    def test_equality(self):
        a = MotifToken('m', {'x': 1.0}, 0.5, ['temporal'])
        b = MotifToken('m', {'x': 1.0}, 0.5, ('temporal',))
        assert a == b
        assert hash(a) == hash(b)
