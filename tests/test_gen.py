import pytest

from swizzle_gen.gen import main
from swizzle_gen.gen_macros import gen_dim_macros


def test_writes_file(tmp_path, caplog):
    path = tmp_path / 'out' / 'dim_macros.rs'
    with caplog.at_level('INFO'):
        assert main(['-o', str(path)]) == 0
    assert path.read_text() == gen_dim_macros()
    assert 'wrote' in caplog.text


def test_stdout(capsys):
    assert main(['-o', '-']) == 0
    assert capsys.readouterr().out == gen_dim_macros()


def test_listing_with_axes(capsys):
    assert main(['-o', '-', '--format', 'listing', '--axes', 'rg', '--max-dim', '2']) == 0
    out = capsys.readouterr().out
    assert out.startswith('# base_dim=1 unique=false (1 swizzles)\nr 1 [0] [0]\n')
    assert 'gr 2 [1, 0] [0, 1]\n' in out


@pytest.mark.parametrize('argv', [
    ['--axes', 'xyzwv'],
    ['--axes', 'xx'],
    ['--axes', 'xy', '--max-dim', '3'],
])
def test_invalid_config(argv, capsys):
    with pytest.raises(SystemExit) as e:
        main(['-o', '-'] + argv)
    assert e.value.code == 2
    assert 'error:' in capsys.readouterr().err
