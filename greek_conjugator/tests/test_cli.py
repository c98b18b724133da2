"""Tests for CSV input/output and the gkverb command line."""

import csv

import pytest

from greek_conjugator.cli import main
from greek_conjugator.csv_io import conjugate_file, conjugate_stems, read_stems, write_rows
from greek_conjugator.errors import PersistenceFailure

PAI_LINE = "παυω, παυεις, παυει, παυομεν, παυετε, παυουσι"


def read_csv(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


# ============================================
# CSV
# ============================================

def test_read_stems(tmp_path):
    path = tmp_path / "stems.csv"
    path.write_text("pres:παυ\n\n  aor:λυ ,extra\n,\n", encoding="utf-8")
    assert read_stems(path) == ["pres:παυ", "aor:λυ"]


def test_write_rows(tmp_path):
    path = tmp_path / "out.csv"
    rows = [["a", "b", "c", "d", "e", "f"], ["1", "2", "3", "4", "5", "6"]]
    assert write_rows(path, rows) == 2
    assert read_csv(path) == rows


def test_write_rows_failure(tmp_path):
    path = tmp_path / "missing-dir" / "out.csv"
    with pytest.raises(PersistenceFailure) as excinfo:
        write_rows(path, [["a"] * 6])
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, OSError)


def test_conjugate_stems_defaults():
    rows = conjugate_stems(["pres:παυ", "perf:πεπαυκ", "aor:λυ"])
    # 4 present rows, none for the perfect, 3 aorist rows
    assert len(rows) == 7
    assert rows[0][0] == "παυω"
    assert rows[2][0] == "ἐπαυον"
    assert rows[4][0] == "λυα"


def test_conjugate_stems_explicit_codes():
    rows = conjugate_stems(["παυ", "ἀκου"], ["iai", "nope"])
    assert [r[0] for r in rows] == ["ἐπαυον", "ἠκουον"]


def test_conjugate_file(tmp_path):
    infile = tmp_path / "stems.csv"
    outfile = tmp_path / "forms.csv"
    infile.write_text("fut:παυσ\n", encoding="utf-8")
    assert conjugate_file(infile, outfile) == 3
    rows = read_csv(outfile)
    assert rows[2] == ["παυσθησομαι", "παυσθησῃ", "παυσθησεται",
                       "παυσθησομεθα", "παυσθησεσθε", "παυσθησονται"]


# ============================================
# COMMAND LINE
# ============================================

def test_single_code(capsys):
    assert main(["--stem", "pres:παυ", "--tva", "pai"]) == 0
    assert capsys.readouterr().out == PAI_LINE + "\n"


def test_multiple_codes_in_order(capsys):
    assert main(["-s", "ἀκου", "-t", "iai,pai"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "ἠκουον, ἠκουες, ἠκουε, ἠκουομεν, ἠκουετε, ἠκουον"
    assert lines[1].startswith("ἀκουω")


def test_all_flag(capsys):
    assert main(["--stem", "aor:λυ", "--all"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_unrecognised_part_prints_nothing(capsys):
    assert main(["--stem", "perf:πεπαυκ", "--all"]) == 0
    assert capsys.readouterr().out == ""


def test_stem_requires_tva_or_all():
    with pytest.raises(SystemExit) as excinfo:
        main(["--stem", "παυ"])
    assert excinfo.value.code == 2


def test_outfile(tmp_path, capsys):
    outfile = tmp_path / "forms.csv"
    assert main(["--stem", "pres:παυ", "--tva", "pai,pfai,ppi", "--outfile", str(outfile)]) == 0
    rows = read_csv(outfile)
    assert len(rows) == 2
    assert ", ".join(rows[0]) == PAI_LINE


def test_to_csv_uses_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--stem", "pres:παυ", "--tva", "pai", "--to-csv"]) == 0
    assert read_csv(tmp_path / "test-output.csv") == [PAI_LINE.split(", ")]


def test_batch(tmp_path):
    infile = tmp_path / "stems.csv"
    outfile = tmp_path / "forms.csv"
    infile.write_text("pres:παυ\naor:λυ\n", encoding="utf-8")
    assert main(["--infile", str(infile), "--outfile", str(outfile)]) == 0
    assert len(read_csv(outfile)) == 7


def test_persistence_failure_exit_code(tmp_path):
    outfile = tmp_path / "nope" / "forms.csv"
    assert main(["--stem", "παυ", "--tva", "pai", "--outfile", str(outfile)]) == 1


def test_missing_infile(tmp_path):
    assert main(["--infile", str(tmp_path / "absent.csv")]) == 1


def test_undecodable_infile(tmp_path):
    infile = tmp_path / "stems.csv"
    infile.write_bytes(b"pres:\xff\xfe\n")
    outfile = tmp_path / "forms.csv"
    assert main(["--infile", str(infile), "--outfile", str(outfile)]) == 1
    assert not outfile.exists()


def test_read_stems_strips_bom(tmp_path):
    path = tmp_path / "stems.csv"
    path.write_bytes("\ufeffpres:παυ\naor:λυ\n".encode("utf-8"))
    assert read_stems(path) == ["pres:παυ", "aor:λυ"]


def test_tva_wins_over_all(capsys):
    assert main(["--stem", "pres:παυ", "--all", "--tva", "pai"]) == 0
    assert capsys.readouterr().out == PAI_LINE + "\n"


def test_unrecognised_part_warns(capsys, caplog):
    assert main(["--stem", "παυ", "--tva", "pai,zzz"]) == 0
    assert capsys.readouterr().out == PAI_LINE + "\n"
    warnings = [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]
    assert warnings == ["zzz: part not recognised"]


def test_delimiter_override(capsys):
    assert main(["--stem", "παυ", "--tva", "pai", "--delimiter", "|"]) == 0
    assert capsys.readouterr().out == "παυω|παυεις|παυει|παυομεν|παυετε|παυουσι\n"


def test_single_stem_io_error_not_reported_as_infile(monkeypatch, caplog):
    def broken_print(*args, **kwargs):
        raise OSError("stdout closed")

    monkeypatch.setattr("greek_conjugator.cli.print_reqs", broken_print)
    with pytest.raises(OSError):
        main(["--stem", "παυ", "--tva", "pai"])
    assert not any("Could not read" in r.getMessage() for r in caplog.records)
