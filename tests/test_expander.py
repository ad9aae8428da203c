"""Tests for blank/comment detection and $$ expansion."""

from smallsh.expander import expand_pid, is_skippable


class TestSkippable:
    """Lines that never become a command."""

    def test_empty_line(self):
        assert is_skippable("")

    def test_whitespace_only(self):
        assert is_skippable("   \t ")

    def test_comment(self):
        assert is_skippable("# echo hi")

    def test_hash_after_space_is_not_a_comment(self):
        assert not is_skippable("  # echo hi")

    def test_command(self):
        assert not is_skippable("ls -la")


class TestExpandPid:
    """$$ becomes the shell's pid, every time it appears."""

    def test_no_marker(self):
        assert expand_pid("echo hi", 42) == "echo hi"

    def test_marker_only(self):
        assert expand_pid("$$", 1234) == "1234"

    def test_marker_inside_word(self):
        assert expand_pid("echo file$$.txt", 77) == "echo file77.txt"

    def test_adjacent_markers(self):
        assert expand_pid("$$$$", 5) == "55"

    def test_odd_dollar_left_alone(self):
        assert expand_pid("$$$", 9) == "9$"

    def test_single_dollar(self):
        assert expand_pid("echo $", 9) == "echo $"

    def test_no_marker_left(self):
        result = expand_pid("a$$ b$$c $$ $$$$", 31337)
        assert "$$" not in result
        assert result == "a31337 b31337c 31337 3133731337"
