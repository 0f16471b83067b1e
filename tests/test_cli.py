"""Tester for kommandolinjen."""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import pytest

from kontoutskrift import cli
from kontoutskrift.constants import OUTPUT_HEADERS


def test_csv_til_standard_ut(tmp_path: Path, two_entry_document, zip_bytes, capsysbinary) -> None:
    source = tmp_path / "utskrift.zip"
    source.write_bytes(zip_bytes([("rapport.xml", two_entry_document)]))

    exit_code = cli.main([str(source)])

    output = capsysbinary.readouterr().out.decode("utf-8").splitlines()
    assert exit_code == 0
    assert output[0] == ";".join(OUTPUT_HEADERS)
    assert output[1].startswith("2023-05-01;2023-05-02;-100.00;EUR;")
    assert output[2].startswith("2023-05-01;2023-05-02;50.00;EUR;")


def test_xlsx_til_fil(tmp_path: Path, two_entry_document) -> None:
    source = tmp_path / "rapport.xml"
    source.write_bytes(two_entry_document)
    target = tmp_path / "ut.xlsx"

    exit_code = cli.main([str(source), "--format", "xlsx", "--output", str(target)])

    assert exit_code == 0
    frame = pd.read_excel(target, engine="openpyxl")
    assert frame["Amount"].tolist() == pytest.approx([-100.0, 50.0])


def test_feil_gir_kode_1_og_ingen_fil(tmp_path: Path, camt_document, entry_xml, capsys) -> None:
    source = tmp_path / "feil.xml"
    source.write_bytes(camt_document([entry_xml(booking=None)]))
    target = tmp_path / "ut.csv"

    exit_code = cli.main([str(source), "-o", str(target)])

    assert exit_code == 1
    assert not target.exists()
    assert "BookgDt/Dt" in capsys.readouterr().err


def test_manglende_fil_gir_kode_1(tmp_path: Path, capsys) -> None:
    exit_code = cli.main([str(tmp_path / "finnes-ikke.xml")])

    assert exit_code == 1
    assert "finnes-ikke.xml" in capsys.readouterr().err


def test_eget_skilletegn(tmp_path: Path, two_entry_document) -> None:
    source = tmp_path / "rapport.xml"
    source.write_bytes(two_entry_document)
    target = tmp_path / "ut.csv"

    assert cli.main([str(source), "-d", ",", "-o", str(target)]) == 0

    frame = pd.read_csv(io.StringIO(target.read_text("utf-8")), dtype=str, keep_default_na=False)
    assert frame["Amount"].tolist() == ["-100.00", "50.00"]


def test_ugyldig_skilletegn_avvises(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "x.xml"), "-d", ";;"])

    assert excinfo.value.code == 2


def test_ukjent_format_avvises(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "x.xml"), "--format", "pdf"])

    assert excinfo.value.code == 2


def test_ødelagt_arkiv_gir_kode_1(
    tmp_path: Path, two_entry_document, zip_bytes, corrupted_member, capsys
) -> None:
    source = tmp_path / "x.zip"
    archive = zip_bytes([("rapport.xml", two_entry_document)])
    source.write_bytes(corrupted_member(archive, "rapport.xml"))

    exit_code = cli.main([str(source)])

    assert exit_code == 1
    assert "rapport.xml" in capsys.readouterr().err


@pytest.mark.parametrize(
    "flag, expected",
    [([], True), (["--parallel"], True), (["--no-parallel"], False)],
)
def test_parallell_kan_slås_av(
    tmp_path: Path, two_entry_document, monkeypatch, flag, expected
) -> None:
    source = tmp_path / "rapport.xml"
    source.write_bytes(two_entry_document)
    target = tmp_path / "ut.csv"
    calls = []

    def fake_load(paths, *, parallel=None, max_workers=None):
        calls.append(parallel)
        return []

    monkeypatch.setattr(cli.settings, "PARALLEL_ENABLED", True)
    monkeypatch.setattr(cli, "load_transactions", fake_load)

    assert cli.main([str(source), *flag, "-o", str(target)]) == 0
    assert calls == [expected]
