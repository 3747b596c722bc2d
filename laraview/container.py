"""
Service Container
Laravel-style container holding the view layer's singleton bindings
"""
import inspect
import threading
from typing import Any, Callable, Dict

from laraview.exceptions import BindingResolutionException

# Marks a singleton whose factory has not run yet; None is a valid instance
UNRESOLVED = object()


class Container:
    """
    Minimal service container

    Bindings are resolved lazily and, for singletons, at most once.
    A container may be shared between several ViewService instances.

    Example:
        container = Container()
        container.singleton('files', lambda app: Filesystem())
        files = container.make('files')
        files is container['files']  # True
    """

    def __init__(self):
        self.bindings: Dict[str, Dict[str, Any]] = {}
        # Re-entrant: singleton factories resolve their own dependencies
        self._lock = threading.RLock()

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding
        If factory: Will be called once (with the container) and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            binding = {'type': 'singleton', 'factory': factory_or_instance, 'instance': UNRESOLVED}
        else:
            binding = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

        with self._lock:
            self.bindings[key] = binding

    def singleton_if(self, key: str, factory_or_instance) -> bool:
        """Register a singleton only if the key is not bound yet"""
        with self._lock:
            if key in self.bindings:
                return False
            self.singleton(key, factory_or_instance)
            return True

    def instance(self, key: str, instance: Any) -> Any:
        """Register an existing instance as a singleton"""
        with self._lock:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': instance}
        return instance

    def bind(self, key: str, factory: Callable):
        """Register a factory binding (called every time)"""
        with self._lock:
            self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve a binding from the container"""
        with self._lock:
            if key not in self.bindings:
                raise BindingResolutionException(f"Binding '{key}' not found in container")

            binding = self.bindings[key]

            if binding['type'] == 'factory':
                return binding['factory'](self)

            if binding['instance'] is UNRESOLVED:
                binding['instance'] = binding['factory'](self)

            return binding['instance']

    def has(self, key: str) -> bool:
        """Check if a binding exists in the container"""
        return key in self.bindings

    bound = has

    def resolved(self, key: str) -> bool:
        """Check if a singleton binding has been instantiated"""
        binding = self.bindings.get(key)
        return bool(binding) and binding['type'] == 'singleton' and binding['instance'] is not UNRESOLVED

    def forget_instance(self, key: str):
        """Drop a cached singleton instance so the next make() rebuilds it"""
        with self._lock:
            binding = self.bindings.get(key)
            if binding and binding['type'] == 'singleton' and binding['factory'] is not None:
                binding['instance'] = UNRESOLVED

    def __getitem__(self, key: str) -> Any:
        return self.make(key)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """Get all container bindings"""
        result = {}
        for key, binding in self.bindings.items():
            result[key] = {
                'type': binding['type'],
                'instantiated': binding['instance'] is not UNRESOLVED if binding['type'] == 'singleton' else None
            }
        return result

    def list_bindings(self) -> str:
        """Get a formatted list of all container bindings"""
        bindings = self.get_bindings()

        if not bindings:
            return "No bindings registered in container."

        singletons = []
        factories = []

        for key, info in bindings.items():
            if info['type'] == 'singleton':
                status = 'instantiated' if info['instantiated'] else 'lazy'
                singletons.append(f"  {key:<30} [{status}]")
            else:
                factories.append(f"  {key:<30} [new instance each call]")

        output = []

        if singletons:
            output.append("Singletons:")
            output.extend(sorted(singletons))

        if factories:
            if output:
                output.append("")
            output.append("Factories (bind):")
            output.extend(sorted(factories))

        return "\n".join(output)
