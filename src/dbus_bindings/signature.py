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


# This file is responsible for turning a single D-Bus type string into the
# name of the native type used to declare it in generated code.
#
# The grammar is small:
#
#   type  := basic | 'a' type | 'a{' key type '}'
#   key   := any basic type except 'v'
#
# Only the first complete type at the start of the string is parsed.  Anything
# after it is ignored, so 'a{sv}NoneOfThisParses' is the same as 'a{sv}'.
# Callers that want to check a whole string must do that themselves.

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_OBJECT_PATH_TYPENAME = 'dbus::ObjectPath'

BOOLEAN_TYPENAME = 'bool'
BYTE_TYPENAME = 'uint8_t'
DOUBLE_TYPENAME = 'double'
SIGNED16_TYPENAME = 'int16_t'
SIGNED32_TYPENAME = 'int32_t'
SIGNED64_TYPENAME = 'int64_t'
STRING_TYPENAME = 'std::string'
UNIX_FD_TYPENAME = 'dbus::FileDescriptor'
UNSIGNED16_TYPENAME = 'uint16_t'
UNSIGNED32_TYPENAME = 'uint32_t'
UNSIGNED64_TYPENAME = 'uint64_t'
VARIANT_TYPENAME = 'chromeos::Any'

ARRAY_TYPENAME_TEMPLATE = 'std::vector<{}>'
DICT_TYPENAME_TEMPLATE = 'std::map<{},{}>'

OBJECT_PATH_CODE = 'o'

# The object path is missing here: it comes from the instance configuration
_fixed_typenames: Dict[str, str] = {
    'b': BOOLEAN_TYPENAME,
    'y': BYTE_TYPENAME,
    'd': DOUBLE_TYPENAME,
    'n': SIGNED16_TYPENAME,
    'i': SIGNED32_TYPENAME,
    'x': SIGNED64_TYPENAME,
    's': STRING_TYPENAME,
    'h': UNIX_FD_TYPENAME,
    'q': UNSIGNED16_TYPENAME,
    'u': UNSIGNED32_TYPENAME,
    't': UNSIGNED64_TYPENAME,
    'v': VARIANT_TYPENAME,
}

BASIC_CODES = ''.join(_fixed_typenames) + OBJECT_PATH_CODE
DICT_KEY_CODES = BASIC_CODES.replace('v', '')


class SignatureError(ValueError):
    """An invalid D-Bus type signature

    :signature: the string which failed to parse
    :reason: a human-readable description of what is wrong with it
    """
    def __init__(self, signature: str, reason: str):
        super().__init__(f"Invalid type signature '{signature}': {reason}")
        self.signature = signature
        self.reason = reason


class DBusSignature:
    """Translates D-Bus type signatures into native type names

    Each instance carries its own object path type name, so differently
    configured instances can be used side by side.  Parsing only touches
    call-local state, so a single instance may be shared between threads as
    long as nobody calls set_object_path_typename() at the same time.
    """
    object_path_typename: str

    def __init__(self, object_path_typename: str = DEFAULT_OBJECT_PATH_TYPENAME):
        self.object_path_typename = object_path_typename

    def set_object_path_typename(self, typename: str) -> None:
        """Set the native type name used for object paths ('o').

        The name is used verbatim.
        """
        self.object_path_typename = typename

    def get_typename(self, signature: str) -> str:
        """Get the native type name for the first complete type in signature.

        Characters following the first complete type are ignored.

        :signature: a D-Bus type string, like 'a{sv}'
        :returns: the type name, like 'std::map<std::string,chromeos::Any>'
        :raises SignatureError: if no complete type is found at the start
        """
        object_path_typename = self.object_path_typename
        offset = 0

        def fail(reason: str) -> SignatureError:
            return SignatureError(signature, f'{reason} at offset {offset}')

        def pop() -> str:
            nonlocal offset
            if offset >= len(signature):
                raise fail('unexpected end of signature')
            char = signature[offset]
            offset += 1
            return char

        def basic_typename(code: str) -> str:
            if code == OBJECT_PATH_CODE:
                return object_path_typename
            return _fixed_typenames[code]

        def get_dict() -> str:
            key = pop()
            if key == '}':
                raise fail('dict entry has no members')
            if key not in DICT_KEY_CODES:
                raise fail(f"'{key}' is not a valid dict entry key type")

            if offset < len(signature) and signature[offset] == '}':
                raise fail('dict entry has a key but no value')
            value_typename = get_one()

            if pop() != '}':
                raise fail('dict entry must have exactly two members')
            return DICT_TYPENAME_TEMPLATE.format(basic_typename(key), value_typename)

        def get_one() -> str:
            first = pop()

            if first in BASIC_CODES:
                return basic_typename(first)
            elif first == 'a':
                if offset >= len(signature):
                    raise fail('array has no element type')
                if signature[offset] == '{':
                    pop()  # '{'
                    return get_dict()
                return ARRAY_TYPENAME_TEMPLATE.format(get_one())
            elif first == '{':
                raise fail("dict entry not directly inside an array")
            elif first == '}':
                raise fail("unexpected '}'")
            else:
                raise fail(f"unknown type code '{first}'")

        if not signature:
            raise SignatureError(signature, 'empty signature')

        try:
            return get_one()
        except RecursionError:
            raise SignatureError(signature, 'nested too deeply') from None

    def parse(self, signature: str) -> Tuple[bool, Optional[str]]:
        """Parse a D-Bus type signature.

        This never raises for invalid input: the caller must check the
        success flag before using the name.

        :signature: a D-Bus type string, like 'a{sv}'
        :returns: (True, typename) on success or (False, None) on failure
        """
        try:
            typename = self.get_typename(signature)
        except SignatureError as exc:
            logger.debug('%s', exc)
            return False, None
        return True, typename
