from django.urls import path
from .views import (
    health,
    get_limits,
    puzzles,
    resolve_puzzle,
    puzzle_detail,
    shuffle_puzzle,
    puzzle_locks,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('limits', get_limits, name='limits'),
    path('puzzles', puzzles, name='puzzles'),
    path('puzzles/resolve', resolve_puzzle, name='resolve-puzzle'),
    path('puzzles/<str:puzzle_id>', puzzle_detail, name='puzzle-detail'),
    path('puzzles/<str:puzzle_id>/shuffle', shuffle_puzzle, name='shuffle-puzzle'),
    path('puzzles/<str:puzzle_id>/locks', puzzle_locks, name='puzzle-locks'),
]
