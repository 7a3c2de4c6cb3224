# ---------------------------------------------------------------------------
# File: data.py
# ---------------------------------------------------------------------------
# Description:
#	Built-in style-guide content (Effective Dart: Style, Usage, Design).
#
# Notes:
#	- Plain literals only. build_document() returns a fresh, equal Document
#	  on every call.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Add Design section samples
# ---------------------------------------------------------------------------

from __future__ import annotations

from .models import Block, Document, Section


T = Block.text_block
C = Block.code_block


def _style() -> Section:
	return Section("Style", (
		T("DO name types using UpperCamelCase. Classes, enum types, typedefs, "
		  "and type parameters should capitalize the first letter of each word, "
		  "including the first word, and use no separators."),
		C("""
class SliderMenu { ... }

class HttpRequest { ... }

typedef Predicate<T> = bool Function(T value);
"""),
		T("DO name packages, directories, and source files using "
		  "lowercase_with_underscores."),
		C("""
library peg_parser.source_scanner;

import 'file_system.dart';
import 'slider_menu.dart';
"""),
		T("DO name other identifiers using lowerCamelCase, and PREFER lowerCamelCase "
		  "for constant names."),
		C("""
var count = 3;

HttpRequest httpRequest;

void align(bool clearItems) {
  // ...
}

const pi = 3.14;
const defaultTimeout = 1000;
"""),
		T("DO format your code using dart format, and AVOID lines longer than "
		  "80 characters. DO use curly braces for all flow control statements."),
		C("""
if (isWeekDay) {
  print('Bike to work!');
} else {
  print('Go dancing or read a book!');
}
"""),
	))


def _usage() -> Section:
	return Section("Usage", (
		T("DO use strings in part of directives, and DON'T import libraries that "
		  "are inside the src directory of another package."),
		T("PREFER using ?? to convert null to a boolean value."),
		C("""
// If you want null to be false:
if (optionalThing?.isEnabled ?? false) {
  print('Have enabled thing.');
}
"""),
		T("DO use adjacent strings to concatenate string literals, and PREFER "
		  "using interpolation to compose strings and values."),
		C("""
raiseAlarm('ERROR: Parts of the spaceship are on fire. Other '
    'parts are overrun by martians. Unclear which are which.');

'Hello, $name! You are ${year - birth} years old.';
"""),
		T("DO use collection literals when possible, and DON'T use .length to see "
		  "if a collection is empty."),
		C("""
var points = <Point>[];
var addresses = <String, Address>{};

if (lunchBox.isEmpty) return 'so hungry...';
if (words.isNotEmpty) return words.join(' ');
"""),
		T("DO initialize fields at their declaration when possible, and DO use "
		  "initializing formals when possible."),
		C("""
class Point {
  double x, y;
  Point(this.x, this.y);
}
"""),
	))


def _design() -> Section:
	return Section("Design", (
		T("DO use terms consistently, and AVOID abbreviations. PREFER putting the "
		  "most descriptive noun last."),
		C("""
pageCount         // A field.
updatePageCount() // Consistent with pageCount.
toSomething()     // Consistent with Iterable's toList().
"""),
		T("PREFER a noun phrase for a non-boolean property or variable, and a "
		  "non-imperative verb phrase for a boolean property or variable."),
		C("""
isEmpty
hasElements
canClose
closesWindow
"""),
		T("PREFER making declarations private. CONSIDER making your class a "
		  "mixin only if it is meant to be mixed in."),
		T("DO use getters for operations that conceptually access properties, "
		  "and DON'T define a setter without a corresponding getter."),
		C("""
rectangle.area;
collection.isEmpty;
button.canShow;
dataSet.minimumValue;
"""),
		T("DO annotate variables without initializers, and DON'T specify a "
		  "return type for a setter."),
		C("""
List<AstNode> parameters;
if (node is Constructor) {
  parameters = node.signature;
} else if (node is Method) {
  parameters = node.parameters;
}
"""),
	))


def build_document() -> Document:
	"""
	Build the built-in Document: Style, Usage, Design (in that order).
	"""
	return Document((_style(), _usage(), _design()))
