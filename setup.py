import os
import re

from setuptools import setup


def get_version():
    module_init = 'textscaler/version.py'

    if not os.path.isfile(module_init):
        module_init = '../' + module_init
        if not os.path.isfile(module_init):
            raise ValueError('Unable to determine version!')

    with open(module_init) as version_file:
        return re.search(r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
                         version_file.read()).group(1)


setup(name='textscaler',
      version=get_version(),
      description='Keep a desktop scaling or brightness value in sync with its '
                  'settings store and DDC/CI monitors',
      url='https://github.com/textscaler/textscaler',
      author='TextScaler Developers',
      license='LGPL',
      platforms='Linux',
      packages=['textscaler', 'textscaler.gtk', 'textscaler.gtk.widgets'],
      python_requires='>=3.9',
      entry_points={
          'gui_scripts': [
              'textscaler-gtk = textscaler.gtk.__main__:main'
          ]
      },
      install_requires=['colorlog', 'numpy', 'ruamel.yaml', 'traitlets', 'wrapt'],
      extras_require={
          'gtk': ['PyGObject'],
          'test': ['pytest'],
      },
      keywords='gnome text scaling brightness ddc ddccontrol monitor',
      include_package_data=True,
      zip_safe=False,
      classifiers=[
          'Development Status :: 3 - Alpha',
          'Environment :: X11 Applications :: GTK',
          'Intended Audience :: End Users/Desktop',
          'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3 :: Only',
          'Topic :: Desktop Environment :: Gnome',
          'Topic :: System :: Hardware'
      ])
