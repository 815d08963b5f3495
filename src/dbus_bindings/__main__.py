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

import argparse
import logging
import sys
import xml.etree.ElementTree as ET
from typing import List, Optional

from . import introspection
from .generator import Generator
from .signature import DEFAULT_OBJECT_PATH_TYPENAME, DBusSignature

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='dbus_bindings',
                                     description="Generate C++ declarations from D-Bus introspection XML")
    parser.add_argument('--debug', action='store_true', help="Enable debug output")
    parser.add_argument('--object-path-typename', default=DEFAULT_OBJECT_PATH_TYPENAME,
                        help=f"Type name used for object paths (default: {DEFAULT_OBJECT_PATH_TYPENAME})")
    parser.add_argument('files', nargs='+', metavar='XMLFILE', help="Introspection XML file")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(name)s-%(levelname)s: %(message)s")
    if args.debug:
        logging.getLogger().setLevel(level=logging.DEBUG)

    generator = Generator(DBusSignature(args.object_path_typename))

    for filename in args.files:
        logger.debug('Reading %s', filename)
        try:
            with open(filename, encoding='utf-8') as file:
                interfaces = introspection.parse_xml(file.read())
        except (OSError, ET.ParseError, KeyError) as exc:
            print(f"{filename}: {exc}", file=sys.stderr)
            return 1

        sys.stdout.write(generator.generate(interfaces))

    return 0


if __name__ == '__main__':
    sys.exit(main())
