"""Tree builders and structural assertions shared by the tree tests."""

from twentyq.core.tree.models import QuestionNode

EXAMPLE_TREE_TEXT = "Q:Does it use electricity?\nA:computer\nA:rock\n"


def build_animal_tree() -> QuestionNode:
    """Two-level tree: mammal? -> bark? (dog/cat), else fly? (eagle/goldfish)."""
    return QuestionNode.question(
        "Is it a mammal?",
        QuestionNode.question("Does it bark?", QuestionNode.answer("dog"), QuestionNode.answer("cat")),
        QuestionNode.question("Can it fly?", QuestionNode.answer("eagle"), QuestionNode.answer("goldfish")),
    )


def assert_same_shape(left: QuestionNode, right: QuestionNode) -> None:
    """Structural equality: same tag and text at every position."""
    assert left.tag == right.tag
    assert left.text == right.text
    if left.is_question:
        assert_same_shape(left.yes, right.yes)
        assert_same_shape(left.no, right.no)


def assert_well_formed(root: QuestionNode) -> None:
    """Every node has zero or two children."""
    for node in root.iter_preorder():
        assert (node.yes is None) == (node.no is None)


def deep_chain_text(depth: int) -> str:
    """Records for ``depth`` questions, each with an answer on yes and the next question on no."""
    return "Q:q\nA:a\n" * depth + "A:end\n"
