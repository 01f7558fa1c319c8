# Grammar fragments for header fields, as native-string regexes. We use native
# strings for all the re patterns, to take advantage of string formatting, and
# then convert to bytestrings when compiling the final re objects.

# https://tools.ietf.org/html/rfc7230#section-3.2.6
#   token          = 1*tchar
#
#   tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                  / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                  / DIGIT / ALPHA
#                  ; any VCHAR, except delimiters
token = r"[-!#$%&'*+.^_`|~0-9a-zA-Z]+"

# https://tools.ietf.org/html/rfc7230#section-3.2
#  field-name     = token
field_name = token

# The standard says:
#
#  field-value    = *( field-content / obs-fold )
#  field-content  = field-vchar [ 1*( SP / HTAB ) field-vchar ]
#  field-vchar    = VCHAR / obs-text
#
# https://tools.ietf.org/html/rfc5234#appendix-B.1
#
#   VCHAR          =  %x21-7E
#                  ; visible (printing) characters
#
# We don't accept obs-text (%x80-FF) or obs-fold at all: values are visible
# US-ASCII plus SP / HTAB, nothing else.
#
# Also, the standard definition of field-content is WRONG! It disallows
# fields containing a single visible character surrounded by whitespace,
# e.g. "foo a bar".
#
# See: https://www.rfc-editor.org/errata_search.php?rfc=7230&eid=4189
#
# So our definition of field_content attempts to fix it up...
field_vchar = r"[\x21-\x7e]"
field_content = r"{field_vchar}+(?:[ \t]+{field_vchar}+)*".format(**globals())

# Our fixed-up field_content already grows to swallow the whole value, so ?
# instead of *
field_value = r"({field_content})?".format(**globals())
