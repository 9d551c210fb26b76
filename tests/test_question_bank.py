from pathlib import Path

import pytest

from conftest import make_question
from dcauto_quiz.core.errors import QuestionImportError
from dcauto_quiz.core.models import ALL_DOMAINS, DOMAINS, Domain, normalize_domain_filter, parse_domain
from dcauto_quiz.core.question_bank import QuestionBank
from dcauto_quiz.core.question_importer import load_question_bank, parse_questions


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2.0 Controller Based DC Networking (ACI)", Domain.ACI),
        ("2.0", Domain.ACI),
        ("aci", Domain.ACI),
        ("NXOS", Domain.NXOS),
        (Domain.UCS, Domain.UCS),
    ],
)
def test_parse_domain_accepts_label_code_and_name(raw, expected):
    assert parse_domain(raw) is expected


def test_parse_domain_rejects_unknown():
    with pytest.raises(ValueError):
        parse_domain("5.0")


def test_normalize_domain_filter_all():
    assert normalize_domain_filter(None) == ALL_DOMAINS
    assert normalize_domain_filter("all") == ALL_DOMAINS
    assert normalize_domain_filter("1.0") is Domain.NPF


def test_domain_list_is_ordered_by_code():
    assert [domain.code for domain in DOMAINS] == ["1.0", "2.0", "3.0", "4.0"]


def test_bank_filters_by_domain(universe):
    bank = QuestionBank(universe)
    assert len(bank.filter_by_domain(Domain.ACI)) == 5
    assert len(bank.filter_by_domain(ALL_DOMAINS)) == 20
    assert bank.count_by_domain() == {domain: 5 for domain in DOMAINS}


def test_bank_reports_missing_domains():
    bank = QuestionBank([make_question("a", Domain.NPF), make_question("b", Domain.UCS)])
    assert bank.domains_present() == [Domain.NPF, Domain.UCS]
    assert bank.filter_by_domain(Domain.ACI) == []


def test_bank_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        QuestionBank([make_question("a"), make_question("a")])


def test_bank_lookup_by_id(universe):
    bank = QuestionBank(universe)
    assert bank.get_question("ucs-3").domain == Domain.UCS
    with pytest.raises(KeyError):
        bank.get_question("missing")


def test_parse_questions_reads_blocks_and_multiline_prompts():
    text = """
# comment line
ID: one
DOMAIN: 1.0
Q: First line
second line with `code`
A: PUT

---
ID: two
DOMAIN: ACI
Q: Which object?
A: Contract
"""
    questions = parse_questions(text)
    assert [q.id for q in questions] == ["one", "two"]
    assert questions[0].prompt == "First line\nsecond line with `code`"
    assert questions[0].domain is Domain.NPF
    assert questions[1].correct_answer == "Contract"


def test_parse_questions_keeps_hash_lines_inside_prompt():
    text = """# bank comment
ID: cfg
DOMAIN: NXOS
Q: Given this config:
# interface Ethernet1/1
what does it do?
A: Nothing yet

# between blocks
ID: next
DOMAIN: UCS
Q: p
A: q
"""
    questions = parse_questions(text)
    assert [q.id for q in questions] == ["cfg", "next"]
    assert questions[0].prompt == "Given this config:\n# interface Ethernet1/1\nwhat does it do?"


def test_parse_questions_reports_missing_answer():
    with pytest.raises(QuestionImportError, match="Block 1: missing A"):
        parse_questions("ID: x\nDOMAIN: 1.0\nQ: prompt")


def test_parse_questions_reports_unknown_domain():
    with pytest.raises(QuestionImportError, match="Block 2"):
        parse_questions("ID: a\nDOMAIN: 1.0\nQ: p\nA: a\n\nID: b\nDOMAIN: 9.9\nQ: p\nA: b")


def test_parse_questions_rejects_stray_text():
    with pytest.raises(QuestionImportError):
        parse_questions("stray\nID: a\nDOMAIN: 1.0\nQ: p\nA: a")


def test_load_question_bank_rejects_duplicate_ids(tmp_path: Path):
    path = tmp_path / "bank.txt"
    path.write_text("ID: a\nDOMAIN: 1.0\nQ: p\nA: x\n\nID: a\nDOMAIN: 2.0\nQ: p\nA: y\n", encoding="utf-8")
    with pytest.raises(QuestionImportError):
        load_question_bank(path)


def test_bundled_question_bank_covers_every_domain():
    bank = load_question_bank()
    assert set(bank.domains_present()) == set(DOMAINS)
    assert all(count >= 4 for count in bank.count_by_domain().values())
