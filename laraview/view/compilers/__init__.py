from laraview.view.compilers.blade_compiler import BladeCompiler

__all__ = ['BladeCompiler']
