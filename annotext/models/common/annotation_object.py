def _readonly_setter(self, name):
    full_classname = self.__class__.__module__
    if full_classname is None:
        full_classname = self.__class__.__qualname__
    else:
        full_classname += '.' + self.__class__.__qualname__
    raise ValueError(f'Property "{name}" of "{full_classname}" is read-only.')

class AnnotationObject(object):
    """
    Base class for all annotext data objects

    Annotation fields are filled in exactly once by the stage that owns them,
    and an object can be frozen once the pipeline hands it back to the caller
    """

    _frozen = False

    def freeze(self):
        """ Make every annotation field on this object read-only """
        self._frozen = True

    @property
    def frozen(self):
        return self._frozen

    def _set_once(self, name, value):
        """
        Assign self._{name} if it has not been assigned yet.

        Raises ValueError if the object is frozen or the field already has a value
        """
        if self._frozen:
            _readonly_setter(self, name)
        if getattr(self, f'_{name}') is not None:
            raise ValueError(f'Property "{name}" of {self!r} was already set to {getattr(self, "_" + name)!r}')
        setattr(self, f'_{name}', value)
