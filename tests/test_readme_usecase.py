from algobook.readme_domain import Difficulty, FileInfo
from algobook.readme_usecase import AlgoUseCase, render_leetcode_list, star_to_emoji

HEADER = "| Name | Star | Difficulty | Practice-Count | Tags |\n"


class _Files:
    def __init__(self, infos, topics):
        self._infos = infos
        self._topics = topics

    def read_all(self):
        return self._infos

    def topics(self):
        return self._topics


class _Writer:
    def __init__(self):
        self.written = []

    def write(self, content):
        self.written.append(content)


def _info():
    return FileInfo(
        id=1,
        name="two-sum",
        main_tag="arrays&hashing",
        other_tags=["dfs", "bfs"],
        practice_count=2,
        has_tags=True,
        star=3,
        difficulty=Difficulty.EASY,
    )


def test_star_to_emoji():
    assert star_to_emoji(0) == ""
    assert star_to_emoji(3) == "⭐" * 3


def test_render_row():
    text = render_leetcode_list([_info()], ["arrays&hashing"])
    assert text.startswith("## Leetcode\n\n### arrays&hashing\n" + HEADER)
    assert "|[1. two-sum](https://leetcode.com/problems/two-sum/)|⭐⭐⭐|easy|2|dfs, bfs|\n" in text


def test_every_topic_gets_a_table_in_order():
    topics = ["stack", "trees", "todo"]
    text = render_leetcode_list([], topics)
    assert text.count(HEADER) == len(topics)
    positions = [text.index(f"### {topic}\n") for topic in topics]
    assert positions == sorted(positions)


def test_files_of_unlisted_topics_are_left_out():
    text = render_leetcode_list([_info()], ["stack"])
    assert "two-sum" not in text


def test_update_readme_writes_rendered_list():
    writer = _Writer()
    files = _Files([_info()], ["arrays&hashing", "todo"])
    AlgoUseCase(writer, files).update_readme()
    assert writer.written == [render_leetcode_list([_info()], ["arrays&hashing", "todo"])]