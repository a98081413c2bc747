import os
import re

from setuptools import setup


def get_version():
    module_init = 'stylecolor/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                     open(module_init).read()).group(1)


setup(name='stylecolor',
      version=get_version(),
      description='Color values and color arithmetic for style sheet compilers',
      license='LGPL',
      packages=['stylecolor'],
      python_requires='>=3.9',
      install_requires=['coloraide', 'colorlog', 'frozendict', 'hsluv',
                        'ruamel.yaml', 'wrapt'],
      extras_require={
          'test': ['pytest']
      },
      keywords='color hsl hsluv husl css style stylesheet',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Software Development :: Libraries',
          'Topic :: Text Processing :: Markup'
      ])
