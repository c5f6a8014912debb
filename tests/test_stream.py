"""Tests for tokenlog.stream module."""
import io
from unittest.mock import MagicMock

import pytest

from tokenlog.stream import WriteOnlyStream


class Sink(WriteOnlyStream):
    """Minimal host recording what the mixin sends."""

    def __init__(self):
        self.info = MagicMock()
        self.close = MagicMock()


class TestWrite:

    def test_write_logs_single_line(self):
        """Test write logs a single line at info."""
        stream = Sink()
        stream.write('Hello world')
        stream.info.assert_called_once_with('Hello world')

    def test_write_logs_multiple_lines(self):
        """Test write logs each line separately."""
        stream = Sink()
        stream.write('Line 1\nLine 2\nLine 3')
        assert stream.info.call_count == 3
        stream.info.assert_any_call('Line 2')

    def test_write_strips_trailing_whitespace(self):
        stream = Sink()
        stream.write('Test line   \n')
        stream.info.assert_called_once_with('Test line')

    def test_write_empty_string(self):
        """Test write with empty string does not log."""
        stream = Sink()
        stream.write('')
        stream.info.assert_not_called()

    def test_write_only_whitespace(self):
        stream = Sink()
        stream.write('   \n\n   ')
        stream.info.assert_not_called()

    def test_write_returns_length(self):
        """Test write reports every character as written."""
        assert Sink().write('abc\n') == 4

    def test_writelines(self):
        stream = Sink()
        stream.writelines(['a\n', 'b\n'])
        assert stream.info.call_count == 2

    def test_flush_is_noop(self):
        Sink().flush()


class TestStreamProperties:

    def test_capabilities(self):
        stream = Sink()
        assert stream.writable() is True
        assert stream.readable() is False
        assert stream.seekable() is False

    def test_isatty_returns_false(self):
        assert Sink().isatty() is False

    def test_closed_is_false(self):
        assert Sink().closed is False

    def test_close_write_closes(self):
        stream = Sink()
        stream.close_write()
        stream.close.assert_called_once()

    def test_close_read_is_noop(self):
        stream = Sink()
        assert stream.close_read() is None
        stream.close.assert_not_called()

    def test_sync_default(self):
        assert Sink().sync is True

    def test_sync_cannot_change(self):
        with pytest.raises(io.UnsupportedOperation, match='sync mode'):
            Sink().sync = False


class TestReadOperations:

    @pytest.mark.parametrize('name,args', [
        ('read', ()),
        ('read', (10,)),
        ('readline', ()),
        ('readlines', ()),
        ('readinto', (bytearray(4),)),
        ('seek', (0,)),
        ('tell', ()),
        ('truncate', ()),
        ('fileno', ()),
        ('detach', ()),
    ])
    def test_raises_unsupported(self, name, args):
        """Test every read-side operation fails explicitly."""
        with pytest.raises(io.UnsupportedOperation, match='write-only'):
            getattr(Sink(), name)(*args)

    def test_iteration_raises(self):
        with pytest.raises(io.UnsupportedOperation):
            iter(Sink())

    def test_unsupported_is_oserror(self):
        """Test callers catching OSError see the failure too."""
        with pytest.raises(OSError):
            Sink().read()


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
