import io
import sys

from pipex.cli import HEREDOC_USAGE, USAGE, main, read_heredoc


def test_read_heredoc_stops_at_limiter():
    prompt = io.StringIO()
    body = read_heredoc("EOF", io.BytesIO(b"one\ntwo\nEOF\nthree\n"), prompt)
    assert body == b"one\ntwo\n"
    assert prompt.getvalue() == "> > > "


def test_read_heredoc_until_end_of_input():
    prompt = io.StringIO()
    body = read_heredoc("EOF", io.BytesIO(b"a\nb"), prompt)
    assert body == b"a\nb"
    assert prompt.getvalue().count("> ") == 3


def test_read_heredoc_needs_whole_line_match():
    body = read_heredoc("EOF", io.BytesIO(b"EOFX\nxEOF\nEOF\n"))
    assert body == b"EOFX\nxEOF\n"


def test_too_few_arguments(capsys):
    assert main(["in", "cat", "out"]) == 1
    assert capsys.readouterr().err == USAGE


def test_runs_commands_between_files(tmp_path):
    data = b"some text\nmore\n"
    infile = tmp_path / "in"
    infile.write_bytes(data)
    outfile = tmp_path / "out"
    assert main([str(infile), "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_bytes() == data.upper()


def test_output_file_is_truncated(tmp_path):
    data = b"x\n"
    infile = tmp_path / "in"
    infile.write_bytes(data)
    outfile = tmp_path / "out"
    outfile.write_bytes(b"previous content that is longer\n")
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_bytes() == data


def test_missing_input_file(tmp_path, capsys):
    outfile = tmp_path / "out"
    missing = tmp_path / "missing"
    assert main([str(missing), "cat", "cat", str(outfile)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("pipex: ")
    assert str(missing) in err
    assert not outfile.exists()


def test_here_doc_appends(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hi\nEND\n")))
    outfile = tmp_path / "out"
    outfile.write_bytes(b"old\n")
    assert main(["here_doc", "END", "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_bytes() == b"old\n" + b"hi\n".upper()
    assert capsys.readouterr().out == "> > "


def test_here_doc_too_few_arguments(tmp_path, capsys):
    outfile = tmp_path / "out"
    assert main(["here_doc", "END", "cat", str(outfile)]) == 1
    assert capsys.readouterr().err == HEREDOC_USAGE
    assert not outfile.exists()