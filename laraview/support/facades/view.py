"""
View Facade
Provides static access to the view factory
"""
from laraview.support.facades.facade import Facade


class View(Facade):
    """
    View Facade

    Example:
        Facade.set_app(blade.app)

        View.share('user', user)
        if View.exists('emails.welcome'):
            html = str(View.make('emails.welcome'))
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'view.factory'
