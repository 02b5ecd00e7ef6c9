"""Small design-pattern examples: composite, singleton and SOLID principles."""