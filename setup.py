from setuptools import setup, find_packages
import re

# Read version from laborcalc/__init__.py
with open('laborcalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='labor-calc',
    version=version,
    packages=find_packages(include=['laborcalc', 'laborcalc.*']),
    package_data={
        'laborcalc': ['labor_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'labor-calc=laborcalc.cli.__main__:main',
            'labor-calc-mcp=laborcalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Statutory end-of-service gratuity, overtime and leave calculations.',
    python_requires='>=3.10',
)
