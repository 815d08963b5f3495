import logging

import pytest
from dbus_bindings import DBusSignature, Generator, introspection
from dbus_bindings.introspection import Argument

XML = """
<node>
  <interface name="org.chromium.Example">
    <method name="Kaboom"/>
    <method name="Echo">
      <arg name="message" type="s" direction="in"/>
      <arg name="reply" type="s" direction="out"/>
    </method>
    <method name="GetObjects">
      <arg type="a{oa{sa{sv}}}" direction="out"/>
    </method>
    <method name="Broken">
      <arg name="what" type="a{s}" direction="in"/>
    </method>
    <property name="Version" type="u" access="read"/>
    <property name="Options" type="a{sv}" access="readwrite"/>
    <property name="Bad" type="al" access="read"/>
    <signal name="Changed">
      <arg name="values" type="ay"/>
      <arg type="x"/>
    </signal>
    <signal name="Weird">
      <arg type="{ss}"/>
    </signal>
  </interface>
</node>
"""


@pytest.fixture
def generator():
    return Generator(DBusSignature('ObjectPathType'))


def test_method(generator):
    info = {'in': [Argument('names', 'as')], 'out': [Argument('', 'a{sv}')]}
    assert generator.method('Frob', info) == (
        'virtual bool Frob(chromeos::ErrorPtr* error, const std::vector<std::string>& in_names, '
        'std::map<std::string,chromeos::Any>* out_arg0) = 0;'
    )


def test_method_no_args(generator):
    assert generator.method('Ping', {'in': [], 'out': []}) == 'virtual bool Ping(chromeos::ErrorPtr* error) = 0;'


def test_invalid_member_skipped(generator, caplog):
    with caplog.at_level(logging.WARNING):
        assert generator.method('Broken', {'in': [Argument('x', 'a{s}')], 'out': []}) is None
        assert generator.signal('Weird', {'in': [Argument('x', '{ss}')]}) is None
        assert generator.property('Bad', {'flags': 'r', 'type': 'al'}) == []
    assert "Broken" in caplog.text
    assert "Weird" in caplog.text
    assert "'al'" in caplog.text


def test_property(generator):
    assert generator.property('Version', {'flags': 'r', 'type': 'u'}) == ['virtual uint32_t GetVersion() const = 0;']
    assert generator.property('Path', {'flags': 'rw', 'type': 'o'}) == [
        'virtual ObjectPathType GetPath() const = 0;',
        'virtual void SetPath(const ObjectPathType& value) = 0;',
    ]


def test_signal(generator):
    info = {'in': [Argument('values', 'ay'), Argument('', 'x')]}
    assert generator.signal('Changed', info) == (
        'void SendChangedSignal(const std::vector<uint8_t>& values, const int64_t& arg1);'
    )


def test_generate(generator):
    output = generator.generate(introspection.parse_xml(XML))
    assert output == '\n'.join([
        '// org.chromium.Example',
        'class ExampleInterface {',
        ' public:',
        '  virtual bool Kaboom(chromeos::ErrorPtr* error) = 0;',
        '  virtual bool Echo(chromeos::ErrorPtr* error, const std::string& in_message, std::string* out_reply) = 0;',
        '  virtual bool GetObjects(chromeos::ErrorPtr* error, '
        'std::map<ObjectPathType,std::map<std::string,std::map<std::string,chromeos::Any>>>* out_arg0) = 0;',
        '  virtual uint32_t GetVersion() const = 0;',
        '  virtual std::map<std::string,chromeos::Any> GetOptions() const = 0;',
        '  virtual void SetOptions(const std::map<std::string,chromeos::Any>& value) = 0;',
        '  void SendChangedSignal(const std::vector<uint8_t>& values, const int64_t& arg1);',
        '};',
        '',
    ])


def test_default_signature():
    assert Generator().signature.parse('o') == (True, 'dbus::ObjectPath')
