from __future__ import annotations

import logging
from typing import Any, Dict

from django.conf import settings
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema

from .puzzles import (
    DEFAULT_LENGTH,
    PuzzleEditor,
    PuzzleRecord,
    PuzzleRecordManager,
    selection_params,
)
from .serializers import (
    LimitsResponseSerializer,
    LockRequestSerializer,
    PuzzleRecordSerializer,
    PuzzleStateResponseSerializer,
    PuzzleUpdateRequestSerializer,
    ResolveResponseSerializer,
)
from .stores import ModelRecordStore

logger = logging.getLogger(__name__)


def _manager() -> PuzzleRecordManager:
    """Record manager over the configured storage key."""
    return PuzzleRecordManager(
        ModelRecordStore(settings.ANAGRAM_STORAGE_KEY),
        max_length=settings.ANAGRAM_MAX_LENGTH,
        max_pool_length=settings.ANAGRAM_MAX_POOL_LENGTH,
    )


def _not_found() -> Response:
    return Response({"error": "Puzzle not found."}, status=status.HTTP_404_NOT_FOUND)


def _record_payload(record: PuzzleRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "length": record.length,
        "known_letters": record.known_letters,
        "pool": record.pool,
        "created_at": record.created_at,
        "summary": record.summary,
    }


def _state_response(manager: PuzzleRecordManager, editor: PuzzleEditor) -> Response:
    """Serialize the stored record plus the editor's transient slots."""
    record = manager.get(editor.puzzle_id)
    resp = {
        "puzzle": _record_payload(record),
        "slots": [{"char": s.char, "locked": s.locked} for s in editor.slots],
        "arrangement": editor.arrangement,
        "error": editor.error,
        "query": selection_params(record),
    }
    return Response(PuzzleStateResponseSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_limits",
    operation_summary="Get puzzle limits",
    operation_description="Returns the default and maximum target length and the maximum pool size.",
    responses={200: LimitsResponseSerializer},
    tags=["meta"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def get_limits(request):
    """Report configured length and pool limits."""
    resp = {
        "default_length": DEFAULT_LENGTH,
        "max_length": settings.ANAGRAM_MAX_LENGTH,
        "max_pool_length": settings.ANAGRAM_MAX_POOL_LENGTH,
    }
    return Response(LimitsResponseSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="list_puzzles",
    operation_summary="List saved puzzles",
    operation_description="Returns every saved puzzle in creation order, each with a known/length summary.",
    responses={200: PuzzleRecordSerializer(many=True)},
    tags=["puzzles"],
)
@swagger_auto_schema(
    method="post",
    operation_id="create_puzzle",
    operation_summary="Create a puzzle",
    operation_description="""
Create a blank puzzle named "Anagram N" with length 5, no locks and an empty pool.

Response:
- the new puzzle record
""",
    request_body=openapi.Schema(type=openapi.TYPE_OBJECT, properties={}),
    responses={201: PuzzleRecordSerializer},
    tags=["puzzles"],
)
@api_view(["GET", "POST"])
@permission_classes([permissions.AllowAny])
def puzzles(request):
    """List puzzles (GET) or create a new one (POST)."""
    manager = _manager()
    if request.method == "POST":
        record = manager.create()
        return Response(PuzzleRecordSerializer(_record_payload(record)).data, status=status.HTTP_201_CREATED)

    data = [_record_payload(r) for r in manager.records]
    return Response(PuzzleRecordSerializer(data, many=True).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="resolve_puzzle",
    operation_summary="Resolve a puzzle by name",
    operation_description="Maps a shared ?name= selection back to the puzzle id (first exact match).",
    manual_parameters=[
        openapi.Parameter("name", openapi.IN_QUERY, type=openapi.TYPE_STRING, required=True),
    ],
    responses={200: ResolveResponseSerializer},
    tags=["puzzles"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def resolve_puzzle(request):
    """Resolve the selection name query parameter to a puzzle id."""
    manager = _manager()
    record = manager.select_by_name(request.GET.get("name"))
    if record is None:
        return _not_found()
    return Response(ResolveResponseSerializer({"id": record.id, "name": record.name}).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_puzzle",
    operation_summary="Get a puzzle",
    operation_description="Returns the puzzle with its slots. No arrangement is kept between requests.",
    responses={200: PuzzleStateResponseSerializer},
    tags=["puzzles"],
)
@swagger_auto_schema(
    method="patch",
    operation_id="update_puzzle",
    operation_summary="Edit a puzzle",
    operation_description="""
Apply edits in the order name, length, pool.

Request body (all optional):
- name (string)
- length (int): clamped to [1, max_length]; clears the arrangement
- pool (string): non-letters dropped; grows length when longer; re-shuffles immediately

Response:
- puzzle, slots, arrangement, error, query
""",
    request_body=PuzzleUpdateRequestSerializer,
    responses={200: PuzzleStateResponseSerializer},
    tags=["puzzles"],
)
@swagger_auto_schema(
    method="delete",
    operation_id="delete_puzzle",
    operation_summary="Delete a puzzle",
    responses={204: "Deleted"},
    tags=["puzzles"],
)
@api_view(["GET", "PATCH", "DELETE"])
@permission_classes([permissions.AllowAny])
def puzzle_detail(request, puzzle_id: str):
    """Retrieve, edit or delete a single puzzle."""
    manager = _manager()
    try:
        manager.select(puzzle_id)
    except KeyError:
        return _not_found()

    if request.method == "DELETE":
        manager.delete(puzzle_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    editor = manager.editor()
    if request.method == "PATCH":
        serializer = PuzzleUpdateRequestSerializer(data=request.data or {})
        serializer.is_valid(raise_exception=True)
        vd = serializer.validated_data
        if "name" in vd:
            editor.rename(vd["name"])
        if "length" in vd:
            editor.set_length(vd["length"])
        if "pool" in vd:
            editor.set_pool(vd["pool"])

    return _state_response(manager, editor)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="shuffle_puzzle",
    operation_summary="Shuffle the free letters",
    operation_description="""
Validate the pool against the locked letters and randomly arrange the leftover
letters into the open slots. A locked letter missing from the pool is reported
in `error` and leaves the open slots empty.
""",
    request_body=openapi.Schema(type=openapi.TYPE_OBJECT, properties={}),
    responses={200: PuzzleStateResponseSerializer},
    tags=["puzzles"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def shuffle_puzzle(request, puzzle_id: str):
    """Shuffle the leftover letters of a puzzle."""
    manager = _manager()
    try:
        manager.select(puzzle_id)
    except KeyError:
        return _not_found()

    editor = manager.editor()
    editor.shuffle()
    return _state_response(manager, editor)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="set_lock",
    operation_summary="Lock or unlock a slot",
    operation_description="""
Request body:
- index (int, required): 0-based slot index, below the target length
- letter (string, optional): letter to lock; empty or null unlocks

Locking clears the arrangement and any previous error.
""",
    request_body=LockRequestSerializer,
    responses={200: PuzzleStateResponseSerializer},
    tags=["puzzles", "locks"],
)
@swagger_auto_schema(
    method="delete",
    operation_id="clear_locks",
    operation_summary="Unlock every slot",
    responses={200: PuzzleStateResponseSerializer},
    tags=["puzzles", "locks"],
)
@api_view(["POST", "DELETE"])
@permission_classes([permissions.AllowAny])
def puzzle_locks(request, puzzle_id: str):
    """Set or clear the locked letters of a puzzle."""
    manager = _manager()
    try:
        manager.select(puzzle_id)
    except KeyError:
        return _not_found()

    editor = manager.editor()
    if request.method == "DELETE":
        editor.clear_locks()
        return _state_response(manager, editor)

    serializer = LockRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    try:
        editor.set_lock(vd["index"], vd.get("letter"))
    except ValueError as e:
        logger.warning("Rejected lock on puzzle %s: %s", puzzle_id, e)
        return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return _state_response(manager, editor)
