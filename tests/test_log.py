from eptolite import log


def test_default_is_stderr(capsys):
    f = log.LogFile("prog")
    assert f.path() == "/dev/fd/2"
    f.write("%s", "hello")
    assert capsys.readouterr().err == "prog: hello\n"


def test_set_truncates_existing(tmp_path):
    path = tmp_path / "a.log"
    path.write_text("old\n")

    f = log.LogFile("prog")
    f.set(str(path))
    assert path.read_text() == ""

    f.write("%s", "new")
    f.flush()
    assert path.read_text() == "prog: new\n"
    f.close()


def test_set_creates_missing(tmp_path):
    path = tmp_path / "sub.log"

    f = log.LogFile("prog")
    f.set(str(path))
    f.write("%s", "one")
    f.write("%s", "two")
    f.flush()
    assert path.read_text() == "prog: one\nprog: two\n"
    f.close()


def test_append_keeps_existing(tmp_path):
    path = tmp_path / "a.log"
    path.write_text("old\n")

    f = log.LogFile("prog")
    f.append(str(path))
    f.write("%s", "new")
    f.flush()
    assert path.read_text() == "old\nprog: new\n"
    f.close()


def test_back_to_stderr(tmp_path, capsys):
    path = tmp_path / "a.log"

    f = log.LogFile("prog", str(path))
    f.write("%s", "file")
    f.append("/dev/fd/2")
    f.write("%s", "stderr")

    assert path.read_text() == "prog: file\n"
    assert capsys.readouterr().err == "prog: stderr\n"


def test_rename(capsys):
    f = log.LogFile("prog")
    f.rename("other")
    f.write("%s", "hello")
    assert capsys.readouterr().err == "other: hello\n"
