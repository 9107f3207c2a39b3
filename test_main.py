import pytest

from main import EXIT_BAD_WORD, EXIT_NO_SOLUTION, EXIT_USAGE, run

CENTERED = ['xxxxx', 'xbcdx', 'xabde', 'xbcde', 'xbxdx']


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(CENTERED) + '\n')
    return str(path)


def test_found(word_file, capsys):
    assert run(['ABCDE', '--words', word_file]) == 0
    out = capsys.readouterr().out
    assert out.split() == ['xxxxx', 'xbcdx', 'xabde', 'xbcde', 'xbxdx', 'xxxxx']


def test_show(word_file, capsys):
    assert run(['abcde', '--words', word_file, '--show']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'xxxxx -> -----'
    assert lines[1] == 'xbcdx -> -GGG-'
    assert lines[2] == 'xabde -> -YYGG'
    assert lines[5] == 'xxxxx -> -----'


def test_no_solution(tmp_path, capsys):
    path = tmp_path / 'words.txt'
    path.write_text('xxxxx\n')
    assert run(['abcde', '--words', str(path)]) == EXIT_NO_SOLUTION
    assert capsys.readouterr().out.strip() == 'No solution found for the word "abcde".'


def test_bad_length(word_file, capsys):
    assert run(['abcd', '--words', word_file]) == EXIT_BAD_WORD
    assert 'exactly 5 characters' in capsys.readouterr().err


def test_missing_word(capsys):
    with pytest.raises(SystemExit) as e:
        run([])
    assert e.value.code == EXIT_USAGE
    assert 'usage' in capsys.readouterr().err


def test_help(capsys):
    with pytest.raises(SystemExit) as e:
        run(['--help'])
    assert e.value.code == 0
    assert 'SUS' in capsys.readouterr().out


def test_missing_word_list(tmp_path, capsys):
    assert run(['abcde', '--words', str(tmp_path / 'missing.txt')]) == EXIT_USAGE
    assert 'Cannot read word list' in capsys.readouterr().err


def test_exit_codes_are_distinct():
    assert len({0, EXIT_USAGE, EXIT_BAD_WORD, EXIT_NO_SOLUTION}) == 4


def test_word_list_not_utf8(tmp_path, capsys):
    path = tmp_path / 'words.txt'
    path.write_bytes(b'xxxxx\n\xff\xfe\xfd\xfc\xfb\n')
    assert run(['abcde', '--words', str(path)]) == EXIT_USAGE
    assert 'Cannot read word list' in capsys.readouterr().err
