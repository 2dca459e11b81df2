"""Problem drivers built on the search engine."""

from .maze import MazeProblem, solve_maze

__all__ = ['MazeProblem', 'solve_maze']
