"""

    crudr.schema -- validating requests against rule sets
    =====================================================

    Rule sets map field names to rule expressions. An expression is either a
    pipe-delimited string (``'required|string|max:255'``), a list of clause
    strings (``['required', 'max:255']``) or a :class:`colander.SchemaNode`
    which is used as is. Expressions are compiled into a colander schema.

"""

import re

import colander

from crudr.exc import InvalidRule, ValidationError

__all__ = (
    'Validator', 'Unique', 'compile_rules', 'parse_rule',
    'drop_uniqueness_rule', 'request_params')

_uniqueness_re = re.compile(r'\|unique:\w+,\w+')

def drop_uniqueness_rule(rules):
    """ Drop all uniqueness clauses within ``rules``

    Useful to reuse the same rule set for updates, where the record being
    edited already holds the value it would be checked against. Only the
    ``|unique:table,column`` syntax is recognized, other encodings are left
    untouched.

        >>> drop_uniqueness_rule({'name': 'required|unique:categories,name'})
        {'name': 'required'}

    """
    result = {}
    for field, rule in rules.items():
        if isinstance(rule, str):
            rule = _uniqueness_re.sub('', rule)
        elif isinstance(rule, (list, tuple)):
            rule = type(rule)(
                _uniqueness_re.sub('', c) if isinstance(c, str) else c
                for c in rule)
        result[field] = rule
    return result

def parse_rule(rule):
    """ Split rule expression into a list of ``(clause, args)`` pairs, where
    ``args`` is the raw string after the colon or ``None``
    """
    if isinstance(rule, str):
        clauses = rule.split('|')
    elif isinstance(rule, (list, tuple)):
        clauses = list(rule)
    else:
        raise InvalidRule('unsupported rule expression %r' % (rule,))
    parsed = []
    for clause in clauses:
        if not isinstance(clause, str):
            raise InvalidRule('unsupported rule clause %r' % (clause,))
        clause = clause.strip()
        if not clause:
            continue
        name, sep, args = clause.partition(':')
        parsed.append((name.strip().lower(), args if sep else None))
    return parsed

class Unique(object):
    """ Validator checking the value isn't taken yet in ``table.column``

    The actual check is delegated to ``unique`` callable the schema is bound
    with, it's called as ``unique(table, column, value, caller)`` and should
    return true if value is free to use.
    """

    def __init__(self, table, column):
        self.table = table
        self.column = column

    def __call__(self, node, value):
        bindings = node.bindings or {}
        unique = bindings.get('unique')
        if unique is None:
            raise InvalidRule(
                "rule 'unique:%s,%s' requires a uniqueness checker" % (
                    self.table, self.column))
        if not unique(self.table, self.column, value, bindings.get('caller')):
            raise colander.Invalid(
                node, '%s has already been taken' % node.name)

    def __repr__(self):
        return '<%s %s.%s>' % (
            self.__class__.__name__, self.table, self.column)

_types = {
    'string':   colander.String,
    'integer':  colander.Integer,
    'numeric':  colander.Float,
    'boolean':  colander.Boolean,
}

def _args(clause, args, count=None):
    if args is None:
        raise InvalidRule("rule '%s' requires arguments" % clause)
    values = [a.strip() for a in args.split(',')]
    if count is not None and len(values) != count:
        raise InvalidRule(
            "rule '%s' requires %d arguments" % (clause, count))
    return values

def _number(clause, value):
    try:
        return float(value) if '.' in value else int(value)
    except ValueError:
        raise InvalidRule("rule '%s' requires numeric arguments" % clause)

def _choices(name, typ, choices):
    node = colander.SchemaNode(typ, name=name)
    try:
        return [typ.deserialize(node, c) for c in choices]
    except colander.Invalid:
        raise InvalidRule("rule 'in' choices %s don't fit the type of '%s'" % (
            ', '.join(choices), name))

class Nullable(colander.SchemaType):
    """ Type accepting an explicitly submitted empty value as ``None``

    Absent values stay absent, so optional fields are still dropped.
    """

    def __init__(self, typ):
        self.typ = typ

    def serialize(self, node, appstruct):
        if appstruct is None:
            return colander.null
        return self.typ.serialize(node, appstruct)

    def deserialize(self, node, cstruct):
        if cstruct is colander.null:
            return colander.null
        if cstruct is None or cstruct == '':
            return None
        return self.typ.deserialize(node, cstruct)

def _unless_none(validator):
    def validate(node, value):
        if value is not None:
            validator(node, value)
    return validate

def rule_node(name, rule):
    """ Compile ``rule`` expression for field ``name`` into
    :class:`colander.SchemaNode`
    """
    if isinstance(rule, colander.SchemaNode):
        node = rule.clone()
        node.name = name
        return node

    typ = colander.String()
    validators = []
    required = nullable = False
    lower = upper = choices = None

    for clause, args in parse_rule(rule):
        if clause == 'required':
            required = True
        elif clause == 'nullable':
            nullable = True
        elif clause in _types:
            typ = _types[clause]()
        elif clause == 'email':
            validators.append(colander.Email())
        elif clause == 'min':
            lower = _number(clause, _args(clause, args, 1)[0])
        elif clause == 'max':
            upper = _number(clause, _args(clause, args, 1)[0])
        elif clause == 'between':
            lower, upper = [_number(clause, a)
                for a in _args(clause, args, 2)]
        elif clause == 'in':
            choices = _args(clause, args)
        elif clause == 'regex':
            if not args:
                raise InvalidRule("rule 'regex' requires a pattern")
            validators.append(colander.Regex(args))
        elif clause == 'unique':
            validators.append(Unique(*_args(clause, args, 2)))
        else:
            raise InvalidRule("unknown rule '%s' for field '%s'" % (
                clause, name))

    if lower is not None or upper is not None:
        if isinstance(typ, colander.Number):
            validators.insert(0, colander.Range(min=lower, max=upper))
        else:
            validators.insert(0, colander.Length(min=lower, max=upper))

    if choices is not None:
        validators.append(colander.OneOf(_choices(name, typ, choices)))

    kw = {}
    if not required:
        kw['missing'] = colander.drop
    if len(validators) == 1:
        kw['validator'] = validators[0]
    elif validators:
        kw['validator'] = colander.All(*validators)
    if nullable and not required:
        typ = Nullable(typ)
        if 'validator' in kw:
            kw['validator'] = _unless_none(kw['validator'])
    return colander.SchemaNode(typ, name=name, **kw)

def compile_rules(rules):
    """ Compile rule set into a mapping schema"""
    schema = colander.SchemaNode(colander.Mapping(unknown='ignore'))
    for name, rule in rules.items():
        schema.add(rule_node(name, rule))
    return schema

def request_params(request):
    """ Extract data to validate from :class:`webob.Request`

    JSON body is used for ``application/json`` requests, query string and
    form params otherwise.
    """
    if request.content_type == 'application/json':
        try:
            data = request.json_body
        except ValueError:
            raise ValidationError({'body': ['Malformed JSON body']})
        return data if isinstance(data, dict) else {}
    return request.params.mixed()

def _messages(e):
    return [m.interpolate() if hasattr(m, 'interpolate') else str(m)
        for m in e.messages()]

class Validator(object):
    """ Validate requests against rule sets

    :param unique:
        callable checking uniqueness for ``unique:table,column`` rules, see
        :class:`.Unique`
    """

    def __init__(self, unique=None):
        self.unique = unique

    def schema(self, rules, caller=None):
        return compile_rules(rules).bind(unique=self.unique, caller=caller)

    def __call__(self, request, rules, caller=None):
        """ Validate ``request`` against ``rules``

        :returns:
            mapping with validated fields only
        :raises crudr.exc.ValidationError:
            with a mapping from field name to a list of messages
        """
        schema = self.schema(rules, caller=caller)
        try:
            return schema.deserialize(request_params(request))
        except colander.Invalid as e:
            errors = {}
            for child in e.children:
                errors.setdefault(child.node.name, []).extend(_messages(child))
            if not errors:
                errors[e.node.name or 'body'] = _messages(e)
            raise ValidationError(errors)

    def __repr__(self):
        return '%s(unique=%r)' % (self.__class__.__name__, self.unique)
