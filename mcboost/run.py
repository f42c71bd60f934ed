import os
import sys
import argparse
import traceback

from mcboost.environment.mb import MCBoost


def parse_conf_intervals(conf_intervals):
    """
    Expands ``2 3 5`` or ``2-10 17`` style arguments into configuration
    numbers
    """
    conf_nums = list()
    for conf_interval in conf_intervals:
        conf_interval = conf_interval.split('-')
        if len(conf_interval) == 1:
            conf_nums.append(int(conf_interval[0]))
        elif len(conf_interval) == 2:
            for conf_num in range(int(conf_interval[0]), int(conf_interval[1])+1):
                conf_nums.append(int(conf_num))
        else:
            raise Exception("Inappropriate format for configuration numbers. See help")
    return conf_nums


def main(argv=None):
    argparser = argparse.ArgumentParser(
                description='Runs mcboost for the specified configuration ')

    argparser.add_argument('--conf_path', '-cp',
                           type=str,
                           default='./configurations.cfg',
                           help='Path to the configuration file')
    argparser.add_argument('conf_intervals',
                           metavar='ci',
                           type=str,
                           nargs='+',
                           help='Configuration numbers to process, either a single number or an interval i.e. 2 3 5 or 2-10 17')
    argparser.add_argument('--debug', '-db',
                           type=str,
                           default='n',
                           help='Enable debug mode [y/n]')
    args = argparser.parse_args(argv)
    conf_path = os.path.realpath(os.path.expanduser(args.conf_path))
    debugEN = args.debug == 'y'
    for conf_num in parse_conf_intervals(args.conf_intervals):
        try:
            mb = MCBoost(conf_num = conf_num,
                         conf_path = conf_path,
                         debugEN = debugEN
                         )
            mb.run()
        except Exception:
            print(traceback.format_exc())
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
