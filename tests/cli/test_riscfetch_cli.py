"""
Tests for the riscfetch command line.

The host filesystem is replaced by a small fake tree through a config
file, so results do not depend on the machine running the tests.
"""

import json

import pytest
import yaml

from riscfetch import cli
from riscfetch.config import CONFIG_ENV_VAR


ISA = "rv64gcv_zba_zbb_zvl256b_sstc"

CPUINFO = """\
processor\t: 0
hart\t\t: 0
isa\t\t: rv64imafdc_zicsr_zifencei_zba_svpbmt
mvendorid\t: 0x489
marchid\t\t: 0x8000000000000007
mimpid\t\t: 0x4210427

processor\t: 1
hart\t\t: 1
isa\t\t: rv64imafdc_zicsr_zifencei_zba_svpbmt
"""


@pytest.fixture
def fake_host(tmp_path, monkeypatch):
    """Config pointing at a fake RISC-V /proc and /sys"""
    proc = tmp_path / "proc"
    proc.mkdir()
    (proc / "cpuinfo").write_text(CPUINFO)
    sys_root = tmp_path / "sys"
    (sys_root / "devices" / "system" / "cpu" / "cpu0").mkdir(parents=True)
    os_release = tmp_path / "os-release"
    os_release.write_text('PRETTY_NAME="Test Linux"\n')

    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({
        'proc_root': str(proc),
        'sys_root': str(sys_root),
        'os_release': str(os_release),
    }))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    monkeypatch.setattr(cli.RiscvDetector, "is_riscv", lambda self: True)
    return tmp_path


class TestTextOutput:
    """Tests for the default text report"""

    def test_isa_override(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "--no-color", "-r", "--style", "none"]) == 0
        out = capsys.readouterr().out
        assert f"ISA: {ISA}" in out
        assert "Ext: I M A F D C V" in out
        assert "Z-Bit Manipulation: Zba Zbb" in out
        assert "S-Supervisor: Sstc" in out
        assert "Vector: Enabled, VLEN>=256" in out
        assert "Harts: 2 harts" in out
        assert "OS:" not in out

    def test_host_isa(self, fake_host, capsys):
        assert cli.main(["--no-color", "-r"]) == 0
        out = capsys.readouterr().out
        assert "ISA: rv64imafdc_zicsr_zifencei_zba_svpbmt" in out
        assert "S-Virtual Memory: Svpbmt" in out
        assert "HW IDs: vendor:0x489 arch:0x8000000000000007 impl:0x4210427" in out

    def test_full_report(self, fake_host, capsys):
        assert cli.main(["--no-color", "--logo", "starfive"]) == 0
        out = capsys.readouterr().out
        assert "StarFive" in out
        assert "OS: Test Linux" in out
        assert "Memory:" in out
        assert "Uptime:" in out

    def test_explain(self, fake_host, capsys):
        assert cli.main(["--isa", "rv64imac_zicond", "--no-color", "-r", "-e"]) == 0
        out = capsys.readouterr().out
        assert "Extensions:" in out
        assert "Z-Extensions (Conditional):" in out
        assert "Conditional Operations" in out

    def test_all(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "--no-color", "-a"]) == 0
        out = capsys.readouterr().out
        assert "Standard Extensions:" in out
        assert "S-Extensions: 1/" in out

    def test_unknown_logo_falls_back(self, fake_host, capsys, caplog):
        assert cli.main(["--isa", ISA, "--no-color", "-r", "--logo", "nonexistent"]) == 0
        assert "RISC-V" in capsys.readouterr().out
        assert "Unknown vendor" in caplog.text


class TestStructuredOutput:
    """Tests for --json / --yaml / --export"""

    def test_json(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "-j", "-r"]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc['isa'] == ISA
        assert doc['extensions'] == ["I", "M", "A", "F", "D", "C", "V"]
        assert doc['s_extensions'] == ["Sstc"]
        assert doc['vector']['vlen'] == 256
        assert doc['vector']['elen'] == 64
        assert 'os' not in doc

    def test_json_full(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "-j"]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc['os'] == "Test Linux"
        assert doc['hart_count'] == 2

    def test_json_all(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "-j", "-a", "-r"]) == 0
        doc = json.loads(capsys.readouterr().out)
        assert set(doc['all_extensions']) == {'standard', 'z', 's'}

    def test_yaml(self, fake_host, capsys):
        assert cli.main(["--isa", ISA, "--yaml", "-r"]) == 0
        doc = yaml.safe_load(capsys.readouterr().out)
        assert doc['z_extensions'] == ["Zicsr", "Zifencei", "Zba", "Zbb", "Zvl256b"]

    def test_json_and_yaml_exclusive(self, fake_host):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--json", "--yaml"])
        assert exc.value.code == 2

    def test_export(self, fake_host, capsys):
        target = fake_host / "out" / "report.json"
        assert cli.main(["--isa", ISA, "--no-color", "-r", "--export", str(target)]) == 0
        captured = capsys.readouterr()
        assert "ISA:" in captured.out
        assert "Report exported to" in captured.err
        assert json.loads(target.read_text())['isa'] == ISA


class TestNotRiscv:
    """Tests for hosts that are not RISC-V"""

    @pytest.fixture(autouse=True)
    def not_riscv(self, fake_host, monkeypatch):
        monkeypatch.setattr(cli.RiscvDetector, "is_riscv", lambda self: False)

    def test_text(self, capsys):
        assert cli.main(["--no-color"]) == 1
        assert "Sorry, not RISC-V" in capsys.readouterr().out

    def test_json(self, capsys):
        assert cli.main(["-j"]) == 1
        assert json.loads(capsys.readouterr().out) == {
            'error': 'not_riscv',
            'message': 'This system is not RISC-V',
        }

    def test_isa_override_skips_check(self, capsys):
        assert cli.main(["--isa", "rv64gc", "-j", "-r"]) == 0
        assert json.loads(capsys.readouterr().out)['isa'] == "rv64gc"


class TestConfigErrors:
    """Tests for configuration failures"""

    def test_missing_config(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "missing.yaml"), "--isa", ISA]) == 2
        assert "riscfetch:" in capsys.readouterr().err

    def test_invalid_style_in_config(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("style: huge\n")
        assert cli.main(["--config", str(path), "--isa", ISA]) == 2

    def test_invalid_style_flag(self):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--style", "huge"])
        assert exc.value.code == 2
