"""
Unit tests for RecordParser: quoted titles, year extraction, genre splitting and bad ids.
Run: python tests/test_record_parser.py
"""

from movie_catalog.errors import MalformedIdentifierError, ParseError
from movie_catalog.models import UNKNOWN_YEAR
from movie_catalog.record_parser import RecordParser, parse_line


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


def assert_raises(exc_type, fn, msg):
	try:
		fn()
	except exc_type as e:
		return e
	raise AssertionError(msg)


def test_plain_line():
	m = parse_line("1,Toy Story (1995),Animation|Comedy")
	assert_equal(m.id, 1, "id")
	assert_equal(m.title, "Toy Story", "year suffix stripped")
	assert_equal(m.year, 1995, "year extracted")
	assert_equal(list(m.genres), ["Animation", "Comedy"], "genres split on |")


def test_quoted_title_with_comma():
	m = parse_line('2,"Grumpier Old Men, The",Comedy|Romance')
	assert_equal(m.id, 2, "id")
	assert_equal(m.title, "Grumpier Old Men, The", "comma kept inside quotes")
	assert_equal(m.year, UNKNOWN_YEAR, "no parens -> unknown year")
	assert_equal(list(m.genres), ["Comedy", "Romance"], "genres after closing quote")


def test_quoted_title_with_year():
	m = parse_line('11,"American President, The (1995)",Comedy|Drama|Romance')
	assert_equal(m.title, "American President, The", "quoted title stripped")
	assert_equal(m.year, 1995, "quoted year")
	assert_equal(list(m.genres), ["Comedy", "Drama", "Romance"], "genres")


def test_only_last_parens_are_the_year():
	m = parse_line('29,"City of Lost Children, The (Cité des enfants perdus, La) (1995)",Adventure|Sci-Fi')
	assert_equal(m.title, "City of Lost Children, The (Cité des enfants perdus, La)", "inner parens kept")
	assert_equal(m.year, 1995, "last parens hold the year")

	m = parse_line("32,Twelve Monkeys (a.k.a. 12 Monkeys) (1995),Mystery|Sci-Fi|Thriller")
	assert_equal(m.title, "Twelve Monkeys (a.k.a. 12 Monkeys)", "aka kept")


def test_title_without_parens_is_untouched():
	m = parse_line("40697,Babylon 5,Sci-Fi")
	assert_equal(m.title, "Babylon 5", "title unmodified")
	assert_equal(m.year, UNKNOWN_YEAR, "unknown year")


def test_year_range_keeps_leading_year():
	m = parse_line("171749,Death Note: Desu nôto (2006–2007),(no genres listed)")
	assert_equal(m.title, "Death Note: Desu nôto", "range suffix stripped")
	assert_equal(m.year, 2006, "first year of the range")
	assert_equal(list(m.genres), ["(no genres listed)"], "placeholder genre kept verbatim")

	m = parse_line("20,Serial (1998 TV),Drama")
	assert_equal((m.title, m.year), ("Serial", 1998), "trailing text after digits")


def test_non_numeric_parens_leave_title_alone():
	m = parse_line("5,Something (Director's Cut),Drama")
	assert_equal(m.title, "Something (Director's Cut)", "text parens kept")
	assert_equal(m.year, UNKNOWN_YEAR, "unknown year")


def test_reversed_parens_are_ignored():
	m = parse_line("6,Odd ) title ( 1999,Drama")
	assert_equal(m.title, "Odd ) title ( 1999", "close before open -> no year")
	assert_equal(m.year, UNKNOWN_YEAR, "unknown year")


def test_genre_field_is_rest_of_line():
	# Only the first two commas split an unquoted line
	m = parse_line("7,Heat (1995),Action|Crime,Thriller")
	assert_equal(list(m.genres), ["Action", "Crime,Thriller"], "no re-split on commas")


def test_empty_genres():
	assert_equal(list(parse_line("8,Untitled (2001),").genres), [], "empty genre field")
	assert_equal(list(parse_line("8,Untitled (2001)").genres), [], "missing genre field")
	assert_equal(list(parse_line('9,"Quoted, Title"').genres), [], "quote at end of line")
	assert_equal(list(parse_line("10,X,Comedy||Drama|").genres), ["Comedy", "Drama"], "empty segments dropped")


def test_duplicate_genres_preserved():
	assert_equal(list(parse_line("12,Twice (2000),Comedy|Comedy").genres), ["Comedy", "Comedy"], "duplicates kept")


def test_line_terminators_stripped():
	m = parse_line("1,Toy Story (1995),Animation|Comedy\r\n")
	assert_equal(list(m.genres), ["Animation", "Comedy"], "CRLF removed")


def test_malformed_identifier():
	err = assert_raises(MalformedIdentifierError, lambda: parse_line("abc,Title (1999),Drama", line_number=7), "bad id should raise")
	assert_equal(err.id_text, "abc", "offending text kept")
	assert_equal(err.line_number, 7, "line number kept")
	assert_equal(isinstance(err, ParseError), True, "is a ParseError")
	assert_equal(isinstance(err, ValueError), True, "is a ValueError")

	assert_raises(MalformedIdentifierError, lambda: parse_line(",Title,Drama"), "empty id should raise")


def test_only_ascii_digits_count():
	assert_raises(MalformedIdentifierError, lambda: parse_line("1_0,X (1995),Drama"), "underscore id should raise")
	assert_raises(MalformedIdentifierError, lambda: parse_line("١٢,X (1995),Drama"), "Arabic-Indic id should raise")
	assert_equal(parse_line(" 42 ,X,Drama").id, 42, "padded id accepted")

	m = parse_line("3,X (1_995),Drama")
	assert_equal((m.title, m.year), ("X", 1), "digits stop at the underscore")
	m = parse_line("4,Y (١٩٩٥),Drama")
	assert_equal((m.title, m.year), ("Y (١٩٩٥)", UNKNOWN_YEAR), "non-ASCII digits are not a year")


def test_extract_year_directly():
	parser = RecordParser()
	assert_equal(parser.extract_year("Heat (1995)"), ("Heat", 1995), "simple")
	assert_equal(parser.extract_year("Heat"), ("Heat", UNKNOWN_YEAR), "no parens")
	assert_equal(parser.extract_year("Heat ( 1995 )"), ("Heat", 1995), "padded year")


def main():
	print("Running RecordParser tests...")
	for name, fn in sorted(globals().items()):
		if name.startswith('test_') and callable(fn):
			fn()
			print(f" - {name} ok")
	print("All RecordParser tests passed!")


if __name__ == '__main__':
	main()
