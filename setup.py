import os
import platform
import codecs

from setuptools import setup

if platform.system() != "Windows":
    readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
    with codecs.open(readme_path, encoding='utf8') as f:
        readme = f.read()
else:
    # The format is messed up with extra line breaks when building wheels on windows.
    # Skip readme in this case.
    readme = "Persistent singly linked lists with pure, stack safe list operations."

version = {}
with codecs.open(os.path.join(os.path.dirname(__file__), '_pconslist_version.py'), encoding='utf8') as f:
    exec(f.read(), version)

setup(
    name='pconslist',
    version=version['__version__'],
    description='Persistent singly linked lists with pure, stack safe list operations',
    long_description=readme,
    long_description_content_type='text/x-rst',
    license='MIT',
    py_modules=['_pconslist_version'],
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: PyPy',
    ],
    extras_require={
        'test': ['pytest', 'hypothesis', 'typing_extensions'],
    },
    packages=['pconslist'],
    package_data={'pconslist': ['py.typed', '__init__.pyi']},
    python_requires='>=3.8',
)
