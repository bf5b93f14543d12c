"""Tests for publishing a batch of files as a single commit."""

import pytest

from mcp_server_github.error_handling import (
    BranchNotFoundError,
    ConflictError,
    InvalidInputError,
    RemoteError,
)
from mcp_server_github.github.models import FileOperation
from mcp_server_github.github.publish import push_files, validate_batch, validate_file_path


def files(contents):
    return [FileOperation(path=path, content=text) for path, text in contents.items()]


class TestValidation:
    @pytest.mark.parametrize(
        "path",
        ["", "   ", "/abs.txt", "dir/", "a//b", "./a", "a/../b", "..", "a/."],
    )
    def test_invalid_paths(self, path):
        with pytest.raises(InvalidInputError):
            validate_file_path(path)

    @pytest.mark.parametrize("path", ["README.md", "src/pkg/mod.py", ".github/workflows/ci.yml", "a..b"])
    def test_valid_paths(self, path):
        validate_file_path(path)

    def test_empty_batch(self):
        with pytest.raises(InvalidInputError, match="At least one file"):
            validate_batch([])

    def test_duplicate_paths(self):
        with pytest.raises(InvalidInputError, match="more than once"):
            validate_batch([FileOperation(path="a", content="1"), FileOperation(path="a", content="2")])


class TestPushFiles:
    """Test the read-tip, tree, commit, fast-forward sequence."""

    @pytest.mark.asyncio
    async def test_single_commit_on_top_of_tip(self, fake_github):
        old_tip = fake_github.tip("main")

        reference = await push_files(
            fake_github,
            "octo",
            "demo",
            "main",
            files({"README.md": "# Updated\n", "docs/intro.md": "Intro\n"}),
            "Update docs",
        )

        new_tip = fake_github.tip("main")
        assert reference.ref == "refs/heads/main"
        assert reference.sha == new_tip
        assert fake_github.commits[new_tip]["parents"] == [old_tip]
        assert fake_github.commits[new_tip]["message"] == "Update docs"
        assert fake_github.files_at("main") == {
            "README.md": "# Updated\n",
            "docs/intro.md": "Intro\n",
            "src/app.py": "print('hello')\n",
        }

    @pytest.mark.asyncio
    async def test_request_sequence(self, fake_github):
        old_tip = fake_github.tip("main")
        await push_files(fake_github, "octo", "demo", "main", files({"a.txt": "A"}), "msg")

        assert [(method, endpoint) for method, endpoint, _ in fake_github.calls] == [
            ("GET", "/repos/octo/demo/git/ref/heads/main"),
            ("POST", "/repos/octo/demo/git/trees"),
            ("POST", "/repos/octo/demo/git/commits"),
            ("PATCH", "/repos/octo/demo/git/refs/heads/main"),
        ]
        tree_body = fake_github.calls[1][2]
        assert tree_body["base_tree"] == old_tip
        assert fake_github.calls[3][2]["force"] is False

    @pytest.mark.asyncio
    async def test_branch_moved_concurrently(self, fake_github):
        theirs = {}

        def concurrent_push(fake):
            theirs["sha"] = fake.commit_files("main", {"other.txt": "theirs"})

        fake_github.before["update_ref"] = concurrent_push

        with pytest.raises(ConflictError, match="not a fast forward"):
            await push_files(fake_github, "octo", "demo", "main", files({"mine.txt": "mine"}), "msg")

        assert fake_github.tip("main") == theirs["sha"]
        assert "mine.txt" not in fake_github.files_at("main")
        assert fake_github.files_at("main")["other.txt"] == "theirs"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("failing_step", ["create_tree", "create_commit", "update_ref"])
    async def test_failure_leaves_branch_unchanged(self, fake_github, failing_step):
        tip = fake_github.tip("main")
        fake_github.failures[failing_step] = RemoteError("Server Error", 500)

        with pytest.raises(RemoteError):
            await push_files(fake_github, "octo", "demo", "main", files({"a.txt": "A", "b.txt": "B"}), "msg")

        assert fake_github.tip("main") == tip
        assert set(fake_github.files_at("main")) == {"README.md", "src/app.py"}

    @pytest.mark.asyncio
    async def test_invalid_entry_sends_nothing(self, fake_github):
        with pytest.raises(InvalidInputError):
            await push_files(
                fake_github,
                "octo",
                "demo",
                "main",
                [FileOperation(path="ok.txt", content="x"), FileOperation(path="../escape", content="x")],
                "msg",
            )
        assert fake_github.calls == []

    @pytest.mark.asyncio
    async def test_empty_batch_sends_nothing(self, fake_github):
        with pytest.raises(InvalidInputError):
            await push_files(fake_github, "octo", "demo", "main", [], "msg")
        assert fake_github.calls == []

    @pytest.mark.asyncio
    async def test_missing_branch(self, fake_github):
        with pytest.raises(BranchNotFoundError):
            await push_files(fake_github, "octo", "demo", "nope", files({"a.txt": "A"}), "msg")
        assert fake_github.calls_of("POST") == []

    @pytest.mark.asyncio
    async def test_branch_only_matching_by_prefix_is_missing(self, fake_github):
        fake_github.refs["heads/feature/x"] = fake_github.tip("main")

        with pytest.raises(BranchNotFoundError, match="Branch 'feature' not found"):
            await push_files(fake_github, "octo", "demo", "feature", files({"a.txt": "A"}), "msg")
        assert fake_github.calls_of("POST") == []
        assert fake_github.calls_of("PATCH") == []

    @pytest.mark.asyncio
    async def test_identical_content_still_makes_a_new_commit(self, fake_github):
        batch = files({"README.md": "# Demo\n"})
        first = await push_files(fake_github, "octo", "demo", "main", batch, "same")
        second = await push_files(fake_github, "octo", "demo", "main", batch, "same")

        assert first.sha != second.sha
        first_tree = fake_github.commits[first.sha]["tree"]
        second_tree = fake_github.commits[second.sha]["tree"]
        assert first_tree == second_tree
        assert fake_github.commits[second.sha]["parents"] == [first.sha]

    @pytest.mark.asyncio
    async def test_push_to_non_default_branch(self, fake_github):
        fake_github.refs["heads/feature"] = fake_github.tip("main")
        main_tip = fake_github.tip("main")

        await push_files(fake_github, "octo", "demo", "feature", files({"f.txt": "F"}), "feature work")

        assert fake_github.tip("main") == main_tip
        assert fake_github.files_at("feature")["f.txt"] == "F"
