from __future__ import annotations

from django.db import models

from .puzzles import PuzzleRecord


# PUBLIC_INTERFACE
class TimeStampedModel(models.Model):
    """Abstract base model providing created/updated timestamps.

    Notes:
        Keep this abstract model free of any logic that would access the Django
        app registry or execute queries at module import time.
    """
    created_at = models.DateTimeField(auto_now_add=True, help_text="Time when the row was created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Time when the row was last updated.")

    class Meta:
        abstract = True


# Upper bound for ANAGRAM_MAX_POOL_LENGTH; settings caps the configured value at this.
POOL_FIELD_LENGTH = 32


# PUBLIC_INTERFACE
class AnagramPuzzle(TimeStampedModel):
    """Stored form of one puzzle record inside a named collection.

    Fields:
    - storage_key: collection identifier, one per record store
    - puzzle_id: opaque record id
    - position: order of the record within its collection
    - name: display name
    - length: number of slots
    - known_letters: JSON object of slot index (string) -> letter
    - pool: available letters
    - created_ms: record creation time in epoch milliseconds
    """
    storage_key = models.CharField(max_length=64, db_index=True, help_text="Collection identifier.")
    puzzle_id = models.CharField(max_length=64, help_text="Opaque puzzle identifier.")
    position = models.PositiveIntegerField(default=0, help_text="Order within the collection.")
    name = models.CharField(max_length=255, blank=True, default="", help_text="Display name.")
    length = models.PositiveSmallIntegerField(default=5, help_text="Number of slots.")
    known_letters = models.JSONField(default=dict, blank=True, help_text="Slot index -> locked letter.")
    pool = models.CharField(max_length=POOL_FIELD_LENGTH, blank=True, default="", help_text="Uppercase available letters.")
    created_ms = models.BigIntegerField(default=0, help_text="Record creation time in epoch milliseconds.")

    class Meta:
        ordering = ["storage_key", "position"]
        unique_together = (("storage_key", "puzzle_id"),)
        verbose_name = "Anagram Puzzle"
        verbose_name_plural = "Anagram Puzzles"

    @classmethod
    def from_record(cls, storage_key: str, position: int, record: PuzzleRecord) -> "AnagramPuzzle":
        row = cls(storage_key=storage_key, position=position)
        row.apply_record(record)
        return row

    def apply_record(self, record: PuzzleRecord) -> None:
        """Copy the record's fields onto this row; storage_key and position are kept."""
        data = record.to_dict()
        self.puzzle_id = data["id"]
        self.name = data["name"]
        self.length = data["length"]
        self.known_letters = data["knownLetters"]
        self.pool = data["pool"]
        self.created_ms = data["createdAt"]

    def to_record(self) -> PuzzleRecord:
        return PuzzleRecord.from_dict(
            {
                "id": self.puzzle_id,
                "name": self.name,
                "length": self.length,
                "knownLetters": self.known_letters,
                "pool": self.pool,
                "createdAt": self.created_ms,
            }
        )

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} ({self.puzzle_id})"
