import pytest

from plainini import IniDocument, IniParseError, IniSection


def test_new_document_is_empty():
    doc = IniDocument()
    assert doc.get_section_names() == ()
    assert doc.get_sections() == {}
    assert doc.get_global_keys() == {}
    assert len(doc) == 0
    assert doc.to_string() == ''


def test_set_value_creates_and_overwrites():
    doc = IniDocument()
    doc.set_value('section1', 'key1', 'value1')
    assert doc.get_value('section1', 'key1') == ('value1', True)
    doc.set_value('section1', 'key1', 'newValue1')
    assert doc.get_value('section1', 'key1') == ('newValue1', True)
    doc.set_value('section2', 'key2', 'value2')
    assert doc.get_value('section2', 'key2') == ('value2', True)


def test_set_value_keeps_section_names_unique():
    doc = IniDocument()
    doc.set_value('section4', 'key4', 'value4')
    doc.set_value('section4', 'key5', 'value5')
    doc.set_value('other', 'k', 'v')
    doc.set_value('section4', 'key4', 'again')
    assert doc.get_section_names() == ('section4', 'other')


def test_set_value_never_touches_globals():
    doc = IniDocument()
    doc.load_from_string('g=1\n')
    doc.set_value('s', 'g', '2')
    assert doc.get_global_keys() == {'g': '1'}


def test_get_value_missing():
    doc = IniDocument()
    doc.load_from_string('[section1]\nkey1=value1\n')
    assert doc.get_value('section1', 'key3') == ('', False)
    assert doc.get_value('nope', 'key1') == ('', False)


def test_accessors_return_copies():
    doc = IniDocument()
    doc.load_from_string('g=1\n[s]\nk=v\n')
    doc.get_sections()['s']['k'] = 'changed'
    doc.get_global_keys()['g'] = 'changed'
    assert doc.get_value('s', 'k') == ('v', True)
    assert doc.get_global_keys() == {'g': '1'}


def test_mapping_protocol():
    doc = IniDocument()
    doc['b'] = {'x': '1'}
    doc['a'] = {'y': '2'}
    assert list(doc) == ['b', 'a']
    assert 'a' in doc and 'c' not in doc

    sect = doc['b']
    assert isinstance(sect, IniSection)
    assert sect.name == 'b'
    sect['z'] = '3'
    assert doc.get_value('b', 'z') == ('3', True)

    doc['b'] = {'only': 'this'}
    assert list(doc) == ['b', 'a']
    assert doc.get_sections()['b'] == {'only': 'this'}

    del doc['b']
    assert doc.get_section_names() == ('a',)
    with pytest.raises(KeyError):
        doc['b']


def test_setitem_copies_mapping():
    src = {'k': 'v'}
    doc = IniDocument()
    doc['s'] = src
    src['k'] = 'changed'
    assert doc.get_value('s', 'k') == ('v', True)


def test_setdefault_and_clear():
    doc = IniDocument()
    assert len(doc.setdefault('s')) == 0
    doc.setdefault('s')['k'] = 'v'
    assert doc.setdefault('s', {'k': 'other'})['k'] == 'v'
    doc.header['g'] = '1'
    doc.clear()
    assert doc.get_section_names() == ()
    assert doc.get_global_keys() == {}


def test_header_view_writes_through():
    doc = IniDocument()
    doc.header['g'] = 'v'
    assert doc.get_global_keys() == {'g': 'v'}
    assert doc.header.name is None


def test_merge():
    a, b = IniDocument(), IniDocument()
    a.load_from_string('g=1\n[x]\nk=1\nj=1\n')
    b.load_from_string('g=2\nh=3\n[y]\nk=2\n[x]\nk=3\n')
    a.merge(b)
    assert a.get_section_names() == ('x', 'y')
    assert a.get_sections() == {'x': {'k': '3', 'j': '1'}, 'y': {'k': '2'}}
    assert a.get_global_keys() == {'g': '2', 'h': '3'}


def test_to_string_orders_sections_and_sorts_keys():
    doc = IniDocument()
    doc.load_from_string(
        '[section1]\nkey2=value2\nkey1=value1\n'
        '[section2]\nkeyB=valueB\nkeyA=valueA\n')
    assert doc.to_string() == (
        '[section1]\nkey1=value1\nkey2=value2\n'
        '[section2]\nkeyA=valueA\nkeyB=valueB\n')
    assert str(doc) == doc.to_string()


def test_to_string_globals_in_insertion_order():
    doc = IniDocument()
    doc.load_from_string('b=2\na=1\nb=3\n[s]\nk=v\n')
    assert doc.to_string() == 'b=3\na=1\n[s]\nk=v\n'


def test_to_string_keeps_empty_sections():
    doc = IniDocument()
    doc.setdefault('empty')
    assert doc.to_string() == '[empty]\n'


def test_to_string_is_lossy_by_default():
    doc = IniDocument()
    doc.load_from_string('[s]\nk="a\\nb"\n')
    assert doc.get_value('s', 'k') == ('a\nb', True)
    text = doc.to_string()
    assert text == '[s]\nk=a\nb\n'
    with pytest.raises(IniParseError):
        IniDocument().load_from_string(text)


def test_to_string_escape_round_trips_control_chars():
    doc = IniDocument()
    doc.load_from_string('g=x\\ty\n[s]\nk=a\\nb\\rc\n')
    text = doc.to_string(escape=True)
    assert text == 'g=x\\ty\n[s]\nk=a\\nb\\rc\n'
    again = IniDocument()
    again.load_from_string(text)
    assert again.get_sections() == doc.get_sections()
    assert again.get_global_keys() == doc.get_global_keys()


def test_quotes_are_not_restored():
    doc = IniDocument()
    doc.load_from_string('[s]\nk="v"\n')
    assert doc.to_string(escape=True) == '[s]\nk=v\n'
