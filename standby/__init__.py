"""
Discord bot for organizing small standby queues for game groups.
Users join and leave a 5-stack queue with buttons; overflow signups wait
in a waitlist and are promoted automatically as slots free up.

Usage:
 Slash commands:
   - standby         - Start a standby queue in the configured channel.
                       The queue message carries Join, Leave and Close
                       buttons. A closed queue can be reopened with its
                       Open button.

   - standby-close   - Close the current queue.
                       Command access can be restricted by role with the
                       config value STANDBY_ADMIN_ROLE_ID.

   - standby-toggle  - Toggle the standby role on yourself. Everybody with
                       the role is pinged once enough members are on
                       standby.

   - standby-purge   - Remove the standby role from all members.
                       Restricted like standby-close.

   - ping            - Bot will simply respond with "pong". Use to test if
                       the bot is still online and responsive.

 Config values:
   The config values have been documented as comments in the
   standby/cfg/config.yml file itself.

:license: MIT License; please see the LICENSE file for info.
"""

__title__ = "Standby queue bot for Discord"
__author__ = "standby-bot collaborators"
__license__ = "MIT"
__version__ = "1.0.0"
