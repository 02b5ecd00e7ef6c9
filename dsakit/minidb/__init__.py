"""Reserved namespace for a text-file database; it holds no modules in this release."""