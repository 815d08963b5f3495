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

import logging
from typing import Any, Dict, List, Optional, Sequence

from .introspection import Argument
from .signature import DBusSignature

logger = logging.getLogger(__name__)

INDENT = '  '


class Generator:
    """Emits C++ declarations for interfaces read from introspection data

    Every argument and property type goes through the DBusSignature that the
    generator was created with.  A member with a type that fails to parse is
    left out of the output, with a warning.
    """
    def __init__(self, signature: Optional[DBusSignature] = None):
        self.signature = signature or DBusSignature()

    def typenames(self, member: str, args: Sequence[Argument]) -> Optional[List[str]]:
        result = []
        for arg in args:
            ok, typename = self.signature.parse(arg.type)
            if not ok:
                logger.warning("Skipping %s: unable to parse signature '%s'", member, arg.type)
                return None
            assert typename is not None
            result.append(typename)
        return result

    def method(self, name: str, info: Dict[str, List[Argument]]) -> Optional[str]:
        in_types = self.typenames(name, info['in'])
        out_types = self.typenames(name, info['out'])
        if in_types is None or out_types is None:
            return None

        params = ['chromeos::ErrorPtr* error']
        for n, (arg, typename) in enumerate(zip(info['in'], in_types)):
            params.append(f'const {typename}& in_{arg.name or f"arg{n}"}')
        for n, (arg, typename) in enumerate(zip(info['out'], out_types)):
            params.append(f'{typename}* out_{arg.name or f"arg{n}"}')

        return f'virtual bool {name}({", ".join(params)}) = 0;'

    def property(self, name: str, info: Dict[str, str]) -> List[str]:
        ok, typename = self.signature.parse(info['type'])
        if not ok:
            logger.warning("Skipping property %s: unable to parse signature '%s'", name, info['type'])
            return []

        lines = []
        if 'r' in info['flags']:
            lines.append(f'virtual {typename} Get{name}() const = 0;')
        if 'w' in info['flags']:
            lines.append(f'virtual void Set{name}(const {typename}& value) = 0;')
        return lines

    def signal(self, name: str, info: Dict[str, List[Argument]]) -> Optional[str]:
        types = self.typenames(name, info['in'])
        if types is None:
            return None

        params = [f'const {typename}& {arg.name or f"arg{n}"}'
                  for n, (arg, typename) in enumerate(zip(info['in'], types))]
        return f'void Send{name}Signal({", ".join(params)});'

    def generate_interface(self, name: str, info: Dict[str, Dict[str, Any]]) -> List[str]:
        logger.debug('Generating interface %s', name)
        body: List[str] = []

        for method_name, method_info in info['methods'].items():
            line = self.method(method_name, method_info)
            if line is not None:
                body.append(line)

        for prop_name, prop_info in info['properties'].items():
            body.extend(self.property(prop_name, prop_info))

        for signal_name, signal_info in info['signals'].items():
            line = self.signal(signal_name, signal_info)
            if line is not None:
                body.append(line)

        class_name = name.rsplit('.', 1)[-1] + 'Interface'
        return [
            f'// {name}',
            f'class {class_name} {{',
            ' public:',
            *(INDENT + line for line in body),
            '};',
        ]

    def generate(self, interfaces: Dict[str, Dict[str, Dict[str, Any]]]) -> str:
        chunks = ['\n'.join(self.generate_interface(name, info)) for name, info in interfaces.items()]
        return ''.join(chunk + '\n' for chunk in chunks)
