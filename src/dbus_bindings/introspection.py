# dbus_bindings
#
# Copyright (C) 2026 The dbus_bindings authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import xml.etree.ElementTree as ET
from typing import Any, Dict, List, NamedTuple


class Argument(NamedTuple):
    name: str
    type: str


def parse_args(tag: ET.Element, direction: str) -> List[Argument]:
    return [Argument(arg.get('name', ''), arg.attrib['type'])
            for arg in tag.findall('arg') if arg.get('direction', 'in') == direction]


def parse_method(method: ET.Element) -> Dict[str, List[Argument]]:
    return {
        "in": parse_args(method, 'in'),
        "out": parse_args(method, 'out'),
    }


def parse_property(prop: ET.Element) -> Dict[str, str]:
    access = prop.get('access', 'read')
    return {
        "flags": {'read': 'r', 'write': 'w', 'readwrite': 'rw'}.get(access, 'r'),
        "type": prop.attrib['type']
    }


def parse_signal(signal: ET.Element) -> Dict[str, List[Argument]]:
    # signal arguments have no direction
    return {"in": [Argument(tag.get('name', ''), tag.attrib['type']) for tag in signal.findall("arg")]}


def parse_interface(interface: ET.Element) -> Dict[str, Dict[str, Any]]:
    return {
        "methods": {tag.attrib['name']: parse_method(tag) for tag in interface.findall('method')},
        "properties": {tag.attrib['name']: parse_property(tag) for tag in interface.findall('property')},
        "signals": {tag.attrib['name']: parse_signal(tag) for tag in interface.findall('signal')}
    }


def parse_xml(xml: str) -> Dict[str, Dict[str, Dict[str, Any]]]:
    et = ET.fromstring(xml)
    return {tag.attrib['name']: parse_interface(tag) for tag in et.findall('interface')}
