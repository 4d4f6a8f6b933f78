"""
Publicizer templates.

Go code templates rendered by the publicizer. Every template receives
``source_field``, ``target_field``, ``depth``, ``dereference`` and
``init``; ``init`` selects the ``:=`` declaration form.
"""

SIMPLE_PUBLICIZE = "simple_publicize"
RECURSIVE_PUBLICIZE = "recursive_publicize"
OBJECT_PUBLICIZE = "object_publicize"
ARRAY_PUBLICIZE = "array_publicize"
MAP_PUBLICIZE = "map_publicize"
FIELD_GUARD = "field_guard"
PUBLICIZE_METHOD = "publicize_method"

simple_publicize_tmpl = (
    '{{ depth|tabs }}{{ target_field }} {% if init %}:{% endif %}= '
    '{% if dereference %}*{% endif %}{{ source_field }}'
)

recursive_publicize_tmpl = (
    '{{ depth|tabs }}{{ target_field }} {% if init %}:{% endif %}= '
    '{{ source_field }}.{{ method_name }}()'
)

object_publicize_tmpl = """\
{% set fields = recursive_publicizer(att, source_field, target_field, depth) %}
{{ depth|tabs }}{{ target_field }} {% if init %}:{% endif %}= &{{ gotypedef(att, depth, False) }}{}
{%- if fields %}{{ "\\n" ~ fields }}{% endif %}"""

array_publicize_tmpl = """\
{% set index = depth_var("i", depth) %}
{% set elem = depth_var("elem", depth) %}
{{ depth|tabs }}{{ target_field }} {% if init %}:{% endif %}= make({{ gotyperef(att.type, att.all_required(), depth, False) }}, len({{ source_field }}))
{{ depth|tabs }}for {{ index }}, {{ elem }} := range {{ source_field }} {
{% if elem_primitive %}
{{ (depth + 1)|tabs }}{{ target_field }}[{{ index }}] = {{ elem }}
{% else %}
{{ publicizer(elem_type, elem, target_field ~ "[" ~ index ~ "]", dereference, depth + 1, False) }}
{% endif %}
{{ depth|tabs }}{{ "}" }}"""

map_publicize_tmpl = """\
{% set key = depth_var("k", depth) %}
{% set value = depth_var("v", depth) %}
{% set pub_key = "pub" ~ key %}
{% set pub_value = "pub" ~ value %}
{{ depth|tabs }}{{ target_field }} {% if init %}:{% endif %}= make({{ gotyperef(att.type, att.all_required(), depth, False) }}, len({{ source_field }}))
{{ depth|tabs }}for {{ key }}, {{ value }} := range {{ source_field }} {
{{ publicizer(key_type, key, pub_key, dereference, depth + 1, True) }}
{{ publicizer(elem_type, value, pub_value, dereference, depth + 1, True) }}
{{ (depth + 1)|tabs }}{{ target_field }}[{{ pub_key }}] = {{ pub_value }}
{{ depth|tabs }}{{ "}" }}"""

field_guard_tmpl = """\
{{ depth|tabs }}if {{ source_field }} != nil {
{{ publication }}
{{ depth|tabs }}{{ "}" }}"""

publicize_method_tmpl = """\
// {{ method_name }} creates {{ public }} from {{ private }}.
func (source *{{ private }}) {{ method_name }}() *{{ public }} {
{{ 1|tabs }}target := &{{ public }}{}
{% if body %}
{{ body }}
{% endif %}
{{ 1|tabs }}return target
}"""

PUBLICIZE_TEMPLATES = {
    SIMPLE_PUBLICIZE: simple_publicize_tmpl,
    RECURSIVE_PUBLICIZE: recursive_publicize_tmpl,
    OBJECT_PUBLICIZE: object_publicize_tmpl,
    ARRAY_PUBLICIZE: array_publicize_tmpl,
    MAP_PUBLICIZE: map_publicize_tmpl,
    FIELD_GUARD: field_guard_tmpl,
    PUBLICIZE_METHOD: publicize_method_tmpl,
}
