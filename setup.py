import os
import setuptools
import codecs

readme_path = os.path.join(os.path.dirname(__file__), 'README.rst')
with codecs.open(readme_path, encoding='utf8') as f:
    for line in f:
        if line.startswith('.. include_start_after'):
            break
    long_description = f.read()

requires_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
with codecs.open(requires_path, encoding='utf8') as f:
    install_requires = f.read().splitlines()

requires_path = os.path.join(os.path.dirname(__file__), 'requirements_dev.txt')
with codecs.open(requires_path, encoding='utf8') as f:
    tests_require = f.read().splitlines()

with open('pyrsistent_catlist/_version.py') as version_file:
    exec(version_file.read())

setuptools.setup(
    name='pyrsistent-catlist',
    version=__version__,
    description='Persistent catenable lists in the style of pyrsistent',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
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
    install_requires=install_requires,
    extras_require={
        'test': tests_require,
        'docs': ['sphinx', 'sphinx_rtd_theme'],
    },
    scripts=[],
    packages=[
        'pyrsistent_catlist',
    ],
    package_data={'pyrsistent_catlist': ['py.typed']},
    python_requires='>=3.8',
)
