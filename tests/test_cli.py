import json

from expense_insights.cli import main


def _write_expenses(path):
    rows = [
        {'_id': str(i), 'description': 'Lunch', 'amount': 12.0 + i, 'category': 'Food', 'date': f'2024-02-0{i + 1}T12:00:00Z'}
        for i in range(4)
    ]
    path.write_text(json.dumps(rows), encoding='utf-8')
    return path


def test_prints_insights_json(tmp_path, capsys):
    expenses = _write_expenses(tmp_path / 'expenses.json')
    code = main([str(expenses), '--monthly-income', '3000', '--seed', '4', '--today', '2024-03-01T00:00:00Z'])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload['stats']['transaction_count'] == 4
    assert payload['stats']['active_days'] == 4
    assert payload['predictions']['confidence'] == 'medium'
    assert payload['generated_at'].startswith('2024-03-01')


def test_answers_a_question(tmp_path, capsys):
    expenses = _write_expenses(tmp_path / 'expenses.json')
    code = main([str(expenses), '--question', 'what category do I use most?'])
    assert code == 0
    assert '"Food"' in capsys.readouterr().out


def test_bad_input_returns_error_code(tmp_path):
    broken = tmp_path / 'expenses.json'
    broken.write_text(json.dumps([{'amount': 5, 'category': 'Snacks', 'date': '2024-01-01'}]), encoding='utf-8')
    assert main([str(broken)]) == 1
    assert main([str(tmp_path / 'missing.csv')]) == 1


def test_unknown_timezone_returns_error_code(tmp_path):
    expenses = _write_expenses(tmp_path / 'expenses.json')
    assert main([str(expenses), '--timezone', 'Mars/Olympus']) == 1
