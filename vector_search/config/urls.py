""" Urls of the modules define here... """

# All Namespaces...
from ..search.handler import search_namespace, health_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api):
        """ Function for adding namespaces... """

        api.add_namespace(search_namespace)
        api.add_namespace(health_namespace)
