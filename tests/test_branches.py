"""Test merge message parsing and branch presence detection."""

import unittest

from fakes import FakeGit

from revoke.branches import get_branch_presence, parse_branch_list, parse_merge_message

BRANCH_ALL_OUTPUT = """  develop
* main
  feature/foo
  remotes/origin/HEAD -> origin/main
  remotes/origin/main
  remotes/origin/feature/foo
  remotes/origin/feature/remote-only
"""


class TestParseMergeMessage(unittest.TestCase):
    """Test recognition of merge commit subjects."""

    def test_extracts_branch_name(self):
        merge = parse_merge_message("Merge branch 'feature/foo' into main")
        self.assertIsNotNone(merge)
        self.assertEqual(merge.branch_name, "feature/foo")
        self.assertEqual(merge.message, "Merge branch 'feature/foo' into main")

    def test_message_without_target(self):
        merge = parse_merge_message("Merge branch 'hotfix'")
        self.assertEqual(merge.branch_name, "hotfix")

    def test_non_merge_messages(self):
        for message in [
            "fix: handle empty input",
            "Merge pull request #12 from user/branch",
            "  Merge branch 'indented'",
            "merge branch 'lowercase'",
            "",
        ]:
            with self.subTest(message=message):
                self.assertIsNone(parse_merge_message(message))


class TestBranchList(unittest.TestCase):
    """Test normalization of `git branch --all` output."""

    def test_parse_branch_list(self):
        branches = parse_branch_list(BRANCH_ALL_OUTPUT)
        self.assertIn("main", branches)
        self.assertIn("develop", branches)
        self.assertIn("feature/foo", branches)
        self.assertIn("origin/feature/foo", branches)
        self.assertIn("origin/HEAD", branches)
        self.assertNotIn("", branches)

    def test_presence_local_and_remote(self):
        git = FakeGit(outputs={"branch --all": BRANCH_ALL_OUTPUT})
        presence = get_branch_presence(git, "feature/foo")
        self.assertTrue(presence.local)
        self.assertTrue(presence.remote)

    def test_presence_remote_only(self):
        git = FakeGit(outputs={"branch --all": BRANCH_ALL_OUTPUT})
        presence = get_branch_presence(git, "feature/remote-only")
        self.assertFalse(presence.local)
        self.assertTrue(presence.remote)

    def test_branch_checked_out_in_other_worktree(self):
        git = FakeGit(outputs={"branch --all": "* main\n+ feature/x\n  remotes/origin/feature/x\n"})
        presence = get_branch_presence(git, "feature/x")
        self.assertTrue(presence.local)
        self.assertTrue(presence.remote)

    def test_presence_other_remote(self):
        git = FakeGit(outputs={"branch --all": BRANCH_ALL_OUTPUT})
        presence = get_branch_presence(git, "feature/foo", remote="upstream")
        self.assertTrue(presence.local)
        self.assertFalse(presence.remote)


if __name__ == "__main__":
    unittest.main()
