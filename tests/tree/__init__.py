"""
Tests for the question tree.

Test organization:
- test_models.py: QuestionNode and TreeStatistics
- test_play.py: Playing, growth on a wrong guess, win counting
- test_serialization.py: Preorder text save/load
- test_loaders.py: File helpers and YAML export
"""
