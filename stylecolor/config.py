#
# Copyright (C) 2026 Stylecolor Developers — LGPL-3.0-or-later
#

# pylint: disable=protected-access
import io
import os
import tempfile

from collections import OrderedDict
from datetime import datetime
from enum import Enum

from ruamel.yaml import YAML

from stylecolor.log import Log


class Configuration(object):
    """
    Configuration hierarchy

    A record of optional, typed fields. When a null attribute
    is queried, ask for the parent recursively.

    Also supports recursive serialization to/from YAML and type coercion.

    Call "create" to generate a type.
    """

    _fields = ()
    _field_types = OrderedDict()
    _yaml_cache = {}


    @classmethod
    def create(cls, name, fields):
        """
        Create a new Configuration class type.

        :param name: Name of the new type
        :param fields: List of (name, type) pairs
        """
        field_types = OrderedDict(fields)
        return type(name, (cls,), {'_fields': tuple(field_types.keys()),
                                   '_field_types': field_types,
                                   '_yaml_cache': {}})


    def __init__(self, parent=None, **kwargs):
        unknown = [key for key in kwargs if key not in self._fields]
        if len(unknown) > 0:
            raise ValueError("Unknown fields for %s: %s" % (self.__class__.__name__, unknown))

        object.__setattr__(self, '_values', tuple(kwargs.get(f) for f in self._fields))
        object.__setattr__(self, '_parent', parent)
        object.__setattr__(self, '_children', None)


    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % self.__class__.__name__)


    def __getattr__(self, name):
        if name.startswith('_') or name not in self._fields:
            raise AttributeError(name)
        return self.get(name)


    def __repr__(self):
        values = ', '.join('%s=%r' % (k, v) for k, v in zip(self._fields, self._values) \
                if v is not None)
        return '%s(%s)' % (self.__class__.__name__, values)


    @property
    def parent(self):
        """
        The instance which supplies values for unset fields
        """
        return self._parent


    @property
    def children(self) -> tuple:
        """
        Children which inherit properties of this instance
        """
        return self._children


    def _add_child(self, child):
        if self._children is None:
            object.__setattr__(self, '_children', (child,))
        else:
            object.__setattr__(self, '_children', (*self._children, child))


    def get(self, key: str, default=None):
        """
        Get a field by name, searching up the hierarchy

        :param key: Field name
        :param default: Default value if None
        :return: Value of the field
        """
        value = self._values[self._fields.index(key)]
        if value is None and self._parent is not None:
            value = self._parent.get(key)
        if value is None:
            return default
        return value


    def search(self, key: str, value) -> list:
        """
        Search for entries in the hierarchy

        :param key: Field name
        :param value: Field value
        :return: The matching entries
        """
        def search_recursive(obj, key, value):
            if obj.get(key) == value:
                yield obj
            if obj.children is not None and len(obj.children) > 0:
                for child in obj.children:
                    yield from search_recursive(child, key, value)
        return [x for x in search_recursive(self, key, value)]


    def flatten(self):
        """
        Flattens the hierarchy to concrete objects with every
        inherited value resolved.

        :return: A detached instance for a leaf, else a list
        """
        flat = []
        if self.children is not None and len(self.children) > 0:
            flat.extend([child.flatten() for child in self.children])
        else:
            return self.__class__(**{field: self.get(field) for field in self._fields})
        return flat


    def sparsedict(self, deep=True) -> dict:
        """
        Returns a "sparse" dict with the parent->child relationships
        represented. This is used for serialization.

        :return: The sparse dict representation
        """
        sparse = {k: self._serialize(v) for k, v in zip(self._fields, self._values) \
                if v is not None}

        if self._children is not None:
            if deep:
                sparse['children'] = [child.sparsedict() for child in self._children]
            else:
                sparse['children'] = self._children

        return sparse


    @staticmethod
    def _serialize(value):
        if isinstance(value, Enum):
            return value.name.lower()
        return value


    @classmethod
    def _coerce_types(cls, mapping) -> OrderedDict:
        """
        Convert simple types where necessary and ensure ordering
        """
        odict = OrderedDict()
        for field, field_type in cls._field_types.items():
            if field not in mapping:
                continue

            val = mapping[field]
            if val is None:
                continue

            if field_type is None or isinstance(val, field_type):
                odict[field] = val
                continue

            try:
                if isinstance(val, str) and issubclass(field_type, Enum):
                    odict[field] = field_type[val.upper()]
                else:
                    odict[field] = field_type(val)

            except (TypeError, ValueError, KeyError):
                raise ValueError("Can't coerce %s to type %s (from %s [%s])" %
                                 (field, field_type, val, type(val)))

        return odict


    @classmethod
    def load_yaml(cls, filename: str, parent=None):
        """
        Load a hierarchy of sparse objects from a YAML file.

        :param filename: The filename to open.
        :param parent: Instance which supplies values missing from the file
        :return: The configuration object hierarchy
        """
        def unpack(mapping, parent=None, attach=False):
            """
            Recursively create Configuration objects with the parent
            correctly set, returning the top-most parent.
            """
            if mapping is None:
                return None

            mapping = dict(mapping)
            children = mapping.pop('children', None)
            unknown = [key for key in mapping if key not in cls._fields]
            if len(unknown) > 0:
                raise ValueError("Unknown fields in %s: %s" % (filename, unknown))

            config = cls(parent=parent, **cls._coerce_types(mapping))
            if attach:
                parent._add_child(config)

            if children is not None and len(children) > 0:
                for child in children:
                    unpack(child, parent=config, attach=True)
            return config

        cache_key = (filename, parent)
        if cache_key in cls._yaml_cache:
            return cls._yaml_cache[cache_key]

        with open(filename, 'r') as yaml_file:
            data = unpack(YAML(typ='safe').load(yaml_file), parent=parent)

        if data is not None:
            cls._yaml_cache[cache_key] = data

        return data


    @property
    def yaml(self) -> str:
        stream = io.StringIO()
        yaml = YAML(typ='safe')
        yaml.default_flow_style = False
        yaml.dump(self.sparsedict(), stream)
        return stream.getvalue()


    def save_yaml(self, filename: str):
        """
        Serialize the hierarchy to a file.

        :param filename: Target filename
        """
        with tempfile.NamedTemporaryFile('w', dir=os.path.dirname(filename) or '.',
                                         delete=False) as temp:
            temp.write('#\n')
            temp.write('#  stylecolor settings\n')
            temp.write('#  Created on %s\n' % datetime.now().isoformat(' '))
            temp.write('#\n')
            temp.write(self.yaml)
            tempname = temp.name
        os.replace(tempname, filename)

        for key in [k for k in self.__class__._yaml_cache if k[0] == filename]:
            del self.__class__._yaml_cache[key]


Settings = Configuration.create('Settings', [
    ('name', str),
    ('alpha_precision', int),
    ('log_level', str),
    ('log_color', bool)])


DEFAULTS = Settings(name='default', alpha_precision=2, log_level='WARNING', log_color=False)


def apply_settings(settings: Settings=None):
    """
    Configure package logging from the given settings

    :param settings: The settings to apply, DEFAULTS if None
    """
    if settings is None:
        settings = DEFAULTS

    Log.set_level(settings.get('log_level', DEFAULTS.log_level).upper())
    Log.enable_color(bool(settings.get('log_color', False)))
