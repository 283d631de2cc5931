from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers


# PUBLIC_INTERFACE
class SlotSerializer(serializers.Serializer):
    """One display slot; char is "" for an empty open slot."""

    char = serializers.CharField(allow_blank=True)
    locked = serializers.BooleanField()


# PUBLIC_INTERFACE
class PuzzleSummarySerializer(serializers.Serializer):
    """Sidebar line: number of locked letters and target length."""

    known = serializers.IntegerField()
    length = serializers.IntegerField()


# PUBLIC_INTERFACE
class PuzzleRecordSerializer(serializers.Serializer):
    """A saved puzzle record.

    Fields:
    - id: opaque identifier
    - name: display name
    - length: number of slots
    - known_letters: slot index -> locked letter
    - pool: available letters
    - created_at: creation time in epoch milliseconds
    - summary: known/length counts for list views
    """

    id = serializers.CharField()
    name = serializers.CharField(allow_blank=True)
    length = serializers.IntegerField()
    known_letters = serializers.DictField(child=serializers.CharField())
    pool = serializers.CharField(allow_blank=True)
    created_at = serializers.IntegerField()
    summary = PuzzleSummarySerializer()


# PUBLIC_INTERFACE
class PuzzleStateResponseSerializer(serializers.Serializer):
    """Puzzle record together with its composed slots and transient arrangement."""

    puzzle = PuzzleRecordSerializer()
    slots = SlotSerializer(many=True)
    arrangement = serializers.ListField(child=serializers.CharField())
    error = serializers.CharField(allow_null=True)
    query = serializers.DictField(
        child=serializers.CharField(), help_text="Query parameters selecting this puzzle by name."
    )


# PUBLIC_INTERFACE
class PuzzleUpdateRequestSerializer(serializers.Serializer):
    """Request payload to edit a puzzle.

    Fields (all optional, at least one required):
    - name: new display name
    - length: new target length, clamped to the configured range
    - pool: raw letters; non-letters are dropped and the pool is re-shuffled
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    length = serializers.IntegerField(required=False)
    pool = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        if not attrs:
            raise serializers.ValidationError("Provide at least one of name, length or pool.")
        return attrs


# PUBLIC_INTERFACE
class LockRequestSerializer(serializers.Serializer):
    """Request payload to lock or unlock a slot.

    Fields:
    - index: 0-based slot index
    - letter: letter to lock; empty or null unlocks the slot
    """

    index = serializers.IntegerField(min_value=0)
    letter = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


# PUBLIC_INTERFACE
class ResolveResponseSerializer(serializers.Serializer):
    """Puzzle id resolved from a selection name."""

    id = serializers.CharField()
    name = serializers.CharField()


# PUBLIC_INTERFACE
class LimitsResponseSerializer(serializers.Serializer):
    """Configured puzzle limits."""

    default_length = serializers.IntegerField()
    max_length = serializers.IntegerField()
    max_pool_length = serializers.IntegerField()
