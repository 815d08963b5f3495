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

from . import introspection
from .generator import Generator
from .signature import DEFAULT_OBJECT_PATH_TYPENAME, DBusSignature, SignatureError

__all__ = [
    "DBusSignature",
    "DEFAULT_OBJECT_PATH_TYPENAME",
    "Generator",
    "SignatureError",
    "introspection",
]
